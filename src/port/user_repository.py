from typing import Protocol

from domain.model.user import Role, User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.VOLUNTEER,
        phone: str | None = None,
        department: str | None = None,
    ) -> User | None:
        """Create a new user. Return User or None if creation failed."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by (normalized) email. Return User or None if not found.

        Raises StorageError when the store cannot answer.
        """
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found.

        Raises StorageError when the store cannot answer.
        """
        ...

    def get_names(self, user_ids: list[str]) -> dict[str, str]:
        """Map each known user ID to the user's display name."""
        ...

    def update_last_login(self, user_id: str) -> bool:
        """Update the last login timestamp for a user. Return True if successful."""
        ...

    def deactivate(self, user_id: str) -> bool:
        """Mark a user inactive. Return True if the user exists."""
        ...

    def count(self) -> int | None: ...

    def clear(self) -> bool: ...
