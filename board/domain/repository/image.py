"""Image store interface."""

from abc import ABC, abstractmethod


class ImageStore(ABC):
    """Byte storage for uploaded images, addressed by relative path.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def write(self, relative_path: str, data: bytes) -> None:
        """Store ``data`` under ``relative_path``, creating parent folders.

        Args:
            relative_path: Slash separated path below the storage root
            data: File content

        Raises:
            OSError: If the file cannot be written
        """
        pass

    @abstractmethod
    async def remove(self, relative_path: str) -> bool:
        """Remove a stored file.

        Args:
            relative_path: Slash separated path below the storage root

        Returns:
            True if a file was removed, False if nothing was stored there

        Raises:
            OSError: If the file exists but cannot be removed
        """
        pass
