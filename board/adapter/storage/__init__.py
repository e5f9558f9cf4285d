"""Image storage backends."""

from .local import LocalImageStore
from .memory import InMemoryImageStore

__all__ = ["InMemoryImageStore", "LocalImageStore"]
