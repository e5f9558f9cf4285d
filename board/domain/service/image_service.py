"""Image storage domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from board.config import StorageSettings
from board.domain.error import ValidationError
from board.domain.repository import ImageStore

from .base import Service


class ImageService(Service):
    """Validates uploads and lays them out as ``/<sub>/<yyyy>/<MM>/<uuid>.<ext>``."""

    def __init__(self, image_store: ImageStore, storage_settings: StorageSettings):
        """Initialize image service.

        Args:
            image_store: Backend holding the files
            storage_settings: Size and extension limits
        """
        self.image_store = image_store
        self.storage_settings = storage_settings

    @staticmethod
    def _extension(filename: str | None) -> str | None:
        if not filename or "." not in filename:
            return None
        return filename.rsplit(".", 1)[1].lower()

    def is_image_file(self, filename: str | None) -> bool:
        """Check whether a filename carries an accepted image extension."""
        extension = self._extension(filename)
        return extension is not None and extension in self.storage_settings.allowed_extensions

    async def save_image(
        self, data: bytes, original_filename: str | None, sub_directory: str
    ) -> str | None:
        """Validate and store an uploaded image.

        Args:
            data: Uploaded bytes, empty when no file was sent
            original_filename: Client side file name, used for the extension
            sub_directory: Top-level folder, e.g. ``posts``

        Returns:
            Public path of the stored file, or None for an empty upload

        Raises:
            ValidationError: If the file is too large or not an image
            OSError: If the file cannot be written
        """
        with logfire.span(
            "image_service.save_image",
            filename=original_filename,
            size=len(data),
            sub_directory=sub_directory,
        ):
            if not data:
                logfire.info("Empty upload ignored", filename=original_filename)
                return None

            if len(data) > self.storage_settings.max_file_size:
                logfire.warn(
                    "Upload rejected: too large",
                    filename=original_filename,
                    size=len(data),
                    max_size=self.storage_settings.max_file_size,
                )
                raise ValidationError(
                    f"File size exceeds the maximum of "
                    f"{self.storage_settings.max_file_size // (1024 * 1024)}MB"
                )

            if not self.is_image_file(original_filename):
                logfire.warn(
                    "Upload rejected: unsupported extension", filename=original_filename
                )
                raise ValidationError(
                    "Unsupported image type, allowed: "
                    + ", ".join(self.storage_settings.allowed_extensions)
                )

            now = datetime.now()
            extension = self._extension(original_filename)
            relative_path = (
                f"{sub_directory}/{now:%Y}/{now:%m}/{uuid4()}.{extension}"
            )

            await self.image_store.write(relative_path, data)
            logfire.info("Image stored", path=relative_path, size=len(data))
            return f"/{relative_path}"

    async def delete_image(self, path: str | None) -> None:
        """Remove a stored image, logging instead of raising on failure.

        Args:
            path: Public path returned by ``save_image``; empty is a no-op
        """
        if not path:
            return

        with logfire.span("image_service.delete_image", path=path):
            try:
                removed = await self.image_store.remove(path.lstrip("/"))
            except OSError as e:
                logfire.error("Image deletion failed", path=path, error=str(e))
                return

            if removed:
                logfire.info("Image deleted", path=path)
            else:
                logfire.warn("Image to delete was not found", path=path)
