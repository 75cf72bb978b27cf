"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone
from domain.model.user import Role, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.VOLUNTEER,
        phone: str | None = None,
        department: str | None = None,
    ) -> User | None:
        if any(u.email == email for u in self.store.values()):
            return None

        user = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            role=role,
            created_at=datetime.now(timezone.utc),
            phone=phone,
            department=department,
            password_hash=password_hash,
        )
        self.store[user.id] = user
        return user

    def update_last_login(self, user_id: str) -> bool:
        user = self.store.get(user_id)
        if not user:
            return False
        user.last_login = datetime.now(timezone.utc)
        return True

    def deactivate(self, user_id: str) -> bool:
        user = self.store.get(user_id)
        if not user:
            return False
        user.is_active = False
        return True

    def clear(self) -> bool:
        self.store.clear()
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)

    def get_names(self, user_ids: list[str]) -> dict[str, str]:
        return {uid: self.store[uid].name for uid in user_ids if uid in self.store}

    def count(self) -> int | None:
        return len(self.store)
