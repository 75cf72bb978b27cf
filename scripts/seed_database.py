#!/usr/bin/env python3
"""Seed MongoDB with the default staff accounts, sample events and sermons.

Existing users, events and sermons are deleted first.

Usage:
    python scripts/seed_database.py
"""

import logging
import sys
sys.path.insert(0, "src")

from dotenv import load_dotenv

from adapter.mongodb.connection import MongoConnection
from adapter.mongodb.event_repository import MongoEventRepository
from adapter.mongodb.indexes import ensure_all_indexes
from adapter.mongodb.sermon_repository import MongoSermonRepository
from adapter.mongodb.user_repository import MongoUserRepository
from domain.model.errors import DomainError
from services.password_hasher import PasswordHasher
from services.seed_service import DEFAULT_USERS, seed
from utils.config import get_settings
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv()
    settings = get_settings()
    setup_structured_logging(level=settings.log_level, service='nrbc-seed')

    db = MongoConnection(settings.mongo_url, settings.mongodb_database).get_database()
    if db is None:
        print("❌ Could not connect to MongoDB (check MONGODB_URI)")
        return 1
    print("✅ Connected to MongoDB")

    ensure_all_indexes(db)
    try:
        summary = seed(
            users=MongoUserRepository(db),
            events=MongoEventRepository(db),
            sermons=MongoSermonRepository(db),
            hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        )
    except DomainError as e:
        print(f"❌ Error seeding database: {e}")
        return 1

    print(f"👤 Created {summary.users} users")
    print(f"📅 Created {summary.events} sample events")
    print(f"📖 Created {summary.sermons} sample sermons")
    print("\n📋 Default login credentials:")
    for user in DEFAULT_USERS:
        print(f"   {user['role'].value.title()}: {user['email']} / {user['password']}")
    print("\n🔒 Change these passwords in production!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
