"""Tests for environment-driven settings."""

import os
import unittest
from unittest.mock import patch

from domain.model.upload import MAX_UPLOAD_BYTES
from utils.config import Settings


class TestSettingsFromEnv(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = Settings.from_env()

        self.assertIsNone(settings.mongo_url)
        self.assertEqual(settings.mongodb_database, 'nrbc_church')
        self.assertEqual(settings.bcrypt_rounds, 12)
        self.assertEqual(settings.max_upload_bytes, MAX_UPLOAD_BYTES)
        self.assertEqual(settings.port, 8000)
        self.assertEqual(settings.cors_origins, '*')

    @patch.dict(os.environ, {
        'MONGODB_URI': 'mongodb://db:27017',
        'BCRYPT_ROUNDS': '10',
        'EMAIL_USER': 'office@nrbcarepo.org',
        'PORT': '',
    }, clear=True)
    def test_overrides(self):
        settings = Settings.from_env()

        self.assertEqual(settings.mongo_url, 'mongodb://db:27017')
        self.assertEqual(settings.bcrypt_rounds, 10)
        self.assertEqual(settings.email_from, 'office@nrbcarepo.org')
        self.assertEqual(settings.port, 8000)

    def test_require_jwt_secret(self):
        self.assertEqual(Settings(jwt_secret_key='abc').require_jwt_secret(), 'abc')
        with self.assertRaises(ValueError) as ctx:
            Settings().require_jwt_secret()
        self.assertIn('JWT_SECRET_KEY', str(ctx.exception))
