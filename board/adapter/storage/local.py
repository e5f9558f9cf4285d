"""Filesystem image store."""

import asyncio
from pathlib import Path

from board.domain.repository import ImageStore


class LocalImageStore(ImageStore):
    """Stores images below a base directory on the local filesystem.

    File I/O runs in a worker thread so large uploads don't block the event
    loop.
    """

    def __init__(self, base_dir: str | Path) -> None:
        """Initialize the store.

        Args:
            base_dir: Root folder, created on first write
        """
        self.base_dir = Path(base_dir).resolve()

    def _resolve(self, relative_path: str) -> Path:
        path = (self.base_dir / relative_path).resolve()
        if not path.is_relative_to(self.base_dir):
            raise PermissionError(f"Path escapes storage root: {relative_path}")
        return path

    @staticmethod
    def _write_file(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    @staticmethod
    def _unlink(path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    async def write(self, relative_path: str, data: bytes) -> None:
        path = self._resolve(relative_path)
        await asyncio.to_thread(self._write_file, path, data)

    async def remove(self, relative_path: str) -> bool:
        path = self._resolve(relative_path)
        return await asyncio.to_thread(self._unlink, path)
