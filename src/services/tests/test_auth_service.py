"""Tests for auth_service registration, login and account management."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import (
    AuthenticationError, DuplicateError, MissingFieldsError, NotFoundError, ValidationError,
)
from domain.model.user import Role
from services import auth_service
from services.password_hasher import PasswordHasher
from services.token_service import verify_token

SECRET = "test-secret"


class AuthServiceTestBase(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()
        self.hasher = PasswordHasher(rounds=4)

    def _register(self, **overrides):
        kwargs = {
            "name": "Grace Okafor",
            "email": "grace@nrbcarepo.org",
            "password": "hallelujah",
        }
        kwargs.update(overrides)
        return auth_service.register(self.repo, self.hasher, **kwargs)


class TestRegister(AuthServiceTestBase):

    def test_defaults_to_volunteer(self):
        user = self._register()

        self.assertEqual(user.role, Role.VOLUNTEER)
        self.assertTrue(user.is_active)

    def test_stores_hash_not_password(self):
        user = self._register()

        self.assertNotEqual(user.password_hash, "hallelujah")
        self.assertTrue(self.hasher.verify("hallelujah", user.password_hash))

    def test_normalizes_email(self):
        user = self._register(email="  Grace@NRBCArepo.org ")
        self.assertEqual(user.email, "grace@nrbcarepo.org")

    def test_missing_fields_are_listed(self):
        with self.assertRaises(MissingFieldsError) as ctx:
            auth_service.register(self.repo, self.hasher, name="", email=None, password="secret1")
        self.assertEqual(ctx.exception.fields, ["name", "email"])

    def test_short_password_rejected(self):
        with self.assertRaises(ValidationError):
            self._register(password="12345")

    def test_unknown_role_rejected(self):
        with self.assertRaises(ValidationError):
            self._register(role="bishop")

    def test_duplicate_email_rejected(self):
        self._register()
        with self.assertRaises(DuplicateError):
            self._register(email="GRACE@nrbcarepo.org")
        self.assertEqual(self.repo.count(), 1)


class TestLogin(AuthServiceTestBase):

    def setUp(self):
        super().setUp()
        self.user = self._register(role="pastor")

    def test_login_returns_verifiable_token(self):
        token, user = auth_service.login(self.repo, self.hasher, SECRET, "grace@nrbcarepo.org", "hallelujah")

        claims = verify_token(token, SECRET)
        self.assertEqual(claims.user_id, self.user.id)
        self.assertEqual(claims.role, Role.PASTOR)
        self.assertEqual(user.id, self.user.id)

    def test_login_lowercases_email(self):
        token, _ = auth_service.login(self.repo, self.hasher, SECRET, "Grace@NRBCarepo.org", "hallelujah")
        self.assertTrue(token)

    def test_login_records_last_login(self):
        self.assertIsNone(self.user.last_login)
        auth_service.login(self.repo, self.hasher, SECRET, "grace@nrbcarepo.org", "hallelujah")
        self.assertIsNotNone(self.repo.get_by_id(self.user.id).last_login)

    def test_wrong_password(self):
        with self.assertRaises(AuthenticationError):
            auth_service.authenticate(self.repo, self.hasher, "grace@nrbcarepo.org", "wrong")

    def test_unknown_email(self):
        with self.assertRaises(AuthenticationError):
            auth_service.authenticate(self.repo, self.hasher, "nobody@nrbcarepo.org", "hallelujah")

    def test_inactive_user(self):
        auth_service.deactivate(self.repo, self.user.id)
        with self.assertRaises(AuthenticationError):
            auth_service.authenticate(self.repo, self.hasher, "grace@nrbcarepo.org", "hallelujah")

    def test_missing_password(self):
        with self.assertRaises(MissingFieldsError):
            auth_service.authenticate(self.repo, self.hasher, "grace@nrbcarepo.org", "")


class TestAccounts(AuthServiceTestBase):

    def test_get_unknown_user(self):
        with self.assertRaises(NotFoundError):
            auth_service.get_user(self.repo, "missing")

    def test_deactivate(self):
        user = self._register()
        result = auth_service.deactivate(self.repo, user.id)
        self.assertFalse(result.is_active)

    def test_deactivate_unknown_user(self):
        with self.assertRaises(NotFoundError):
            auth_service.deactivate(self.repo, "missing")


if __name__ == '__main__':
    unittest.main()
