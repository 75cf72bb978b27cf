"""Shared wiring for route tests: in-memory stores and signed tokens."""

import unittest
from datetime import timedelta

from fastapi.testclient import TestClient

from adapter.fake.contact_message_repository import FakeContactMessageRepository
from adapter.fake.event_repository import FakeEventRepository
from adapter.fake.newsletter_repository import FakeNewsletterRepository
from adapter.fake.notification_queue import FakeNotificationQueue
from adapter.fake.prayer_request_repository import FakePrayerRequestRepository
from adapter.fake.sermon_repository import FakeSermonRepository
from adapter.fake.upload_storage import FakeUploadStorage
from adapter.fake.user_repository import FakeUserRepository
from api.dependencies import (
    get_contact_message_repo, get_event_repo, get_newsletter_repo, get_notification_queue,
    get_password_hasher, get_prayer_request_repo, get_sermon_repo, get_settings,
    get_upload_storage, get_user_repo,
)
from api.main import app
from domain.model.user import Role, SessionClaims, User
from services.password_hasher import PasswordHasher
from services.token_service import SESSION_TTL, issue_token
from utils.config import Settings

TEST_SECRET = "test-secret-key"

TEST_SETTINGS = Settings(
    jwt_secret_key=TEST_SECRET,
    bcrypt_rounds=4,
    prayer_email="prayer@nrbcarepo.org",
    contact_email="office@nrbcarepo.org",
)


class RouteTestCase(unittest.TestCase):
    """Overrides every store dependency with a fake for the test's duration."""

    def setUp(self):
        self.client = TestClient(app)
        self.hasher = PasswordHasher(rounds=TEST_SETTINGS.bcrypt_rounds)
        self.users = FakeUserRepository()
        self.events = FakeEventRepository()
        self.prayer_requests = FakePrayerRequestRepository()
        self.messages = FakeContactMessageRepository()
        self.newsletter = FakeNewsletterRepository()
        self.sermons = FakeSermonRepository()
        self.queue = FakeNotificationQueue()
        self.storage = FakeUploadStorage()

        app.dependency_overrides.update({
            get_settings: lambda: TEST_SETTINGS,
            get_user_repo: lambda: self.users,
            get_event_repo: lambda: self.events,
            get_prayer_request_repo: lambda: self.prayer_requests,
            get_contact_message_repo: lambda: self.messages,
            get_newsletter_repo: lambda: self.newsletter,
            get_sermon_repo: lambda: self.sermons,
            get_notification_queue: lambda: self.queue,
            get_password_hasher: lambda: self.hasher,
            get_upload_storage: lambda: self.storage,
        })

    def tearDown(self):
        """Clean up dependency overrides."""
        app.dependency_overrides.clear()

    def create_user(self, role: Role = Role.ADMIN, email: str | None = None, password: str = "secret123") -> User:
        return self.users.create(
            name=f"Test {role.value.title()}",
            email=email or f"{role.value}@nrbcarepo.org",
            password_hash=self.hasher.hash(password),
            role=role,
        )

    def token_for(self, user: User, secret: str = TEST_SECRET, ttl: timedelta = SESSION_TTL) -> str:
        claims = SessionClaims(user_id=user.id, email=user.email, role=user.role)
        return issue_token(claims, secret, ttl)

    def auth_headers(self, role: Role = Role.ADMIN) -> dict:
        user = self.users.get_by_email(f"{role.value}@nrbcarepo.org") or self.create_user(role)
        return {"Authorization": f"Bearer {self.token_for(user)}"}
