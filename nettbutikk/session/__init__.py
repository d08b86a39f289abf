"""Session package: in-memory login state."""
from .store import SessionStore

__all__ = ["SessionStore"]
