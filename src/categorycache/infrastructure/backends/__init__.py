"""Cache store implementations."""

from categorycache.infrastructure.backends.memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]
