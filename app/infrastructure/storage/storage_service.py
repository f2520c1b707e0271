"""
Supabase Storage service for audio track files.
Implements the domain blob store on top of a Supabase storage bucket.
"""

import logging
from typing import Optional
from urllib.parse import urlparse, unquote

from supabase import Client, create_client

from app.config import Settings
from app.domain.models.base import ExternalServiceError
from app.domain.services.blob_store import BlobStore

logger = logging.getLogger(__name__)


class SupabaseStorageService(BlobStore):
    """Blob store backed by one Supabase Storage bucket."""

    SERVICE_NAME = "Supabase Storage"

    def __init__(self, supabase_client: Client, bucket: str = "audio-tracks"):
        """Initialize storage service with Supabase client."""
        self.client = supabase_client
        self.bucket = bucket

    async def upload(self, path: str, content: bytes, content_type: str) -> None:
        """
        Upload a file to the bucket.

        Raises:
            ExternalServiceError: If the storage call fails
        """
        try:
            self.client.storage.from_(self.bucket).upload(
                path=path,
                file=content,
                file_options={
                    "content-type": content_type,
                    "cache-control": "3600",
                }
            )
        except Exception as e:
            raise ExternalServiceError(self.SERVICE_NAME, f"Failed to upload file: {str(e)}")

        logger.debug(f"Uploaded {len(content)} bytes to {self.bucket}/{path}")

    async def get_download_url(self, path: str) -> str:
        """
        Get the public download URL of a stored file.

        Raises:
            ExternalServiceError: If the storage call fails
        """
        try:
            url = self.client.storage.from_(self.bucket).get_public_url(path)
        except Exception as e:
            raise ExternalServiceError(self.SERVICE_NAME, f"Failed to get download URL: {str(e)}")

        return url.rstrip("?")

    async def delete(self, path: str) -> None:
        """
        Delete a file from the bucket.

        Raises:
            ExternalServiceError: If the storage call fails
        """
        try:
            self.client.storage.from_(self.bucket).remove([path])
        except Exception as e:
            raise ExternalServiceError(self.SERVICE_NAME, f"Failed to delete file: {str(e)}")

    def path_from_url(self, url: str) -> Optional[str]:
        """
        Recover the object path from a public or signed URL of this bucket.
        Query strings such as the media flag are ignored.
        """
        # Stored paths are sanitized and never contain "&"
        path = urlparse(url).path.split("&", 1)[0]
        for marker in (f"/object/public/{self.bucket}/", f"/object/sign/{self.bucket}/"):
            if marker in path:
                return unquote(path.split(marker, 1)[1])
        return None


def build_storage_service(settings: Settings) -> SupabaseStorageService:
    """Create the storage service from settings."""
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return SupabaseStorageService(client, bucket=settings.audio_bucket)
