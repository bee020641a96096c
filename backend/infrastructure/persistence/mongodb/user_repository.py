"""MongoDB User Repository implementation."""

from typing import Any, Dict, List, Optional

from domain.user.core.entities.user import User
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository[User]):
    """MongoDB implementation of User repository.

    Document Schema:
    {
        "_id": "uuid-string",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "login": "ada",
        "password": "pbkdf2_sha256$..."
    }

    Examples:
        >>> repo = MongoUserRepository(db)
        >>> await repo.add(user)
        >>> found = await repo.find_by_login("ada")
    """

    @property
    def collection_name(self) -> str:
        return "Users"

    def to_document(self, entity: User) -> Dict[str, Any]:
        return entity.to_dict()

    def from_document(self, doc: Dict[str, Any]) -> User:
        return User.from_dict(doc)

    async def add(self, user: User) -> None:
        await self._insert_one(self.to_document(user))

    async def find_by_login_or_email(self, login: str, email: str) -> List[User]:
        docs = await self._find_many({"$or": [{"login": login}, {"email": email}]})
        return [self.from_document(doc) for doc in docs]

    async def find_by_login(self, login: str) -> Optional[User]:
        doc = await self._find_one({"login": login})
        return self.from_document(doc) if doc else None

    async def update(self, user_id: str, fields: Dict[str, Any]) -> int:
        return await self._update_one({"_id": user_id}, {"$set": fields})
