"""Gateway Factory for Persistence Layer.

Environment-based backend selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

Usage:
    from infrastructure.persistence.factory import create_gateway

    gateway = create_gateway()
    await gateway.connect()
"""

from domain.shared.ports.persistence_gateway import IPersistenceGateway
from infrastructure.config import (
    get_mongodb_database,
    get_mongodb_uri,
    get_repository_backend,
)
from infrastructure.persistence.in_memory.gateway import InMemoryGateway
from infrastructure.persistence.mongodb.gateway import MongoGateway


def create_gateway() -> IPersistenceGateway:
    """Create persistence gateway based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory gateway (default, fast, transient)
        - "mongodb": MongoDB gateway (persistent, requires MONGODB_URI)

    Raises:
        ValueError: If mongodb selected but MONGODB_URI not set
    """
    mode = get_repository_backend()

    if mode == "mongodb":
        uri = get_mongodb_uri()
        if not uri:
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        return MongoGateway(uri, get_mongodb_database())

    return InMemoryGateway()
