"""In-memory persistence adapters."""

from infrastructure.persistence.in_memory.gateway import InMemoryGateway

__all__ = ["InMemoryGateway"]
