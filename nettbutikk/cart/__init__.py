"""Cart package: in-memory cart store."""
from .store import CartStore

__all__ = ["CartStore"]
