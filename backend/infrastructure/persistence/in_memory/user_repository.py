"""In-memory User Repository implementation for testing."""

from copy import deepcopy
from typing import Any, Dict, List, Optional

from domain.user.core.entities.user import User


class InMemoryUserRepository:
    """In-memory implementation of IUserRepository.

    Useful for testing without database dependencies.
    Not suitable for production use.
    """

    def __init__(self) -> None:
        self._storage: Dict[str, Dict[str, Any]] = {}

    async def add(self, user: User) -> None:
        self._storage[user.id] = deepcopy(user.to_dict())

    async def find_by_login_or_email(self, login: str, email: str) -> List[User]:
        return [
            User.from_dict(doc)
            for doc in self._storage.values()
            if doc["login"] == login or doc["email"] == email
        ]

    async def find_by_login(self, login: str) -> Optional[User]:
        for doc in self._storage.values():
            if doc["login"] == login:
                return User.from_dict(doc)
        return None

    async def update(self, user_id: str, fields: Dict[str, Any]) -> int:
        doc = self._storage.get(user_id)
        if doc is None:
            return 0
        doc.update(fields)
        return 1

    def clear(self) -> None:
        self._storage.clear()
