"""In-memory image store for tests."""

from board.domain.repository import ImageStore


class InMemoryImageStore(ImageStore):
    """Keeps stored images in a dict keyed by relative path."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    async def write(self, relative_path: str, data: bytes) -> None:
        self.files[relative_path] = data

    async def remove(self, relative_path: str) -> bool:
        return self.files.pop(relative_path, None) is not None

    def contains(self, public_path: str) -> bool:
        """Check whether a path returned by the image service is stored."""
        return public_path.lstrip("/") in self.files
