"""
Blob store interface for audio files.
Binary content lives in an external object store keyed by path.
"""

from abc import ABC, abstractmethod
from typing import Optional


class BlobStore(ABC):
    """
    Blob store interface.
    Every call is attempted once; failures raise ExternalServiceError.
    """

    @abstractmethod
    async def upload(self, path: str, content: bytes, content_type: str) -> None:
        """
        Store content at the given path.
        """
        pass

    @abstractmethod
    async def get_download_url(self, path: str) -> str:
        """
        Return a durable download URL for a stored path.
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """
        Delete the object stored at path.
        """
        pass

    @abstractmethod
    def path_from_url(self, url: str) -> Optional[str]:
        """
        Recover the storage path from a download URL issued by this store.
        """
        pass
