"""MongoDB persistence adapters (Motor)."""

from infrastructure.persistence.mongodb.gateway import MongoGateway

__all__ = ["MongoGateway"]
