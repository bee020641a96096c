"""User entity - account owner of meals, diary entries and cards."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping
from uuid import uuid4


@dataclass
class User:
    """User aggregate root.

    Invariants:
    - login and email are unique across users (checked at registration)
    - the password is only ever held as a hash

    Examples:
        >>> user = User(first_name="Ada", last_name="L", email="a@x.io",
        ...             login="ada", password_hash="pbkdf2_sha256$...")
        >>> user.to_dict()["login"]
        'ada'
    """

    first_name: str
    last_name: str
    email: str
    login: str
    password_hash: str
    id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=str(data["_id"]),
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            email=data.get("email", ""),
            login=data["login"],
            password_hash=data["password"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "login": self.login,
            "password": self.password_hash,
        }
