"""Card entity - a free-text tag saved by a user."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping
from uuid import uuid4


@dataclass(frozen=True)
class Card:
    user_id: int
    name: str
    id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Card":
        return cls(id=str(data["_id"]), user_id=int(data["user"]), name=data["name"])

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, "user": self.user_id, "name": self.name}
