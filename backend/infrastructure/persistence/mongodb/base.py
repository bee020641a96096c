"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Document mapping (domain ↔ MongoDB)
- Error handling (log and re-raise)
- Logging

All concrete MongoDB repositories should inherit from MongoBaseRepository.
The connection itself is owned by MongoGateway.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar
import logging

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

TEntity = TypeVar("TEntity")  # Domain entity type

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoMealRepository(MongoBaseRepository[Meal]):
            @property
            def collection_name(self) -> str:
                return "Meals"
            ...
    """

    def __init__(self, db: AsyncIOMotorDatabase[Dict[str, Any]]):
        """
        Initialize repository on an open database handle.

        Args:
            db: Motor database (from MongoGateway)
        """
        self._db = db
        self._collection = db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            return await self._collection.find_one(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _find_many(self, filter_dict: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Find all matching documents, in natural order.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            cursor = self._collection.find(filter_dict)
            return await cursor.to_list(length=None)
        except Exception as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """
        Insert single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            await self._collection.insert_one(document)
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, " f"error={e}")
            raise

    async def _update_one(self, filter_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> int:
        """
        Update single document with error handling.

        Returns:
            Number of documents matched (0 or 1)

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.update_one(filter_dict, update_dict)
            return int(result.matched_count)
        except Exception as e:
            logger.error(
                f"Error in update_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document with error handling.

        Returns:
            Number of documents deleted (0 or 1)

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
            return int(result.deleted_count)
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
