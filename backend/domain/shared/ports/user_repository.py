"""User repository port (interface)."""

from typing import Any, Dict, List, Optional, Protocol

from domain.user.core.entities.user import User


class IUserRepository(Protocol):
    """Interface for the Users collection."""

    async def add(self, user: User) -> None:
        ...

    async def find_by_login_or_email(self, login: str, email: str) -> List[User]:
        """Users whose login or email collides with the given ones."""
        ...

    async def find_by_login(self, login: str) -> Optional[User]:
        ...

    async def update(self, user_id: str, fields: Dict[str, Any]) -> int:
        """
        Set ``fields`` (document field names) on the user with ``user_id``.

        Returns:
            Number of documents matched (0 or 1)
        """
        ...
