"""Image storage infrastructure providers."""

from dishka import Scope, provide
import logfire

from board.adapter.storage import LocalImageStore
from board.config import StorageSettings
from board.domain.repository import ImageStore
from board.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Image storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_store(self, storage_settings: StorageSettings) -> ImageStore:
        """Provide filesystem image store rooted at the upload directory."""
        store = LocalImageStore(storage_settings.upload_dir)
        logfire.info("Image store configured", base_dir=str(store.base_dir))
        return store
