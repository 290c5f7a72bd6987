import logging
import os
import uuid
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile

from core.config import Settings, settings
from core.errors import ContentValidationError, StorageError

logger = logging.getLogger(__name__)


@dataclass
class StoredObject:
    key: str
    url: str
    original_name: str
    size: int
    mimetype: str


def _extension(filename: str) -> str:
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower()
    return ext or "bin"


def read_upload(upload: UploadFile, max_bytes: int) -> bytes:
    """Read a multipart file fully into memory, refusing anything over ``max_bytes``."""
    if upload is None or not upload.filename:
        raise ContentValidationError("No file provided")
    data = upload.file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ContentValidationError(f"File too large (limit {max_bytes} bytes)")
    return data


class R2Storage:
    """Cloudflare R2 through its S3-compatible API."""

    def __init__(self, endpoint: str | None, access_key_id: str | None, secret_access_key: str | None,
                 bucket: str | None, public_url: str | None, client=None):
        self.endpoint = endpoint
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.bucket = bucket
        self.public_url = (public_url or "").rstrip("/")
        self._s3 = client

    @classmethod
    def from_settings(cls, conf: Settings) -> "R2Storage":
        return cls(
            endpoint=conf.CLOUDFLARE_R2_ENDPOINT,
            access_key_id=conf.CLOUDFLARE_R2_ACCESS_KEY_ID,
            secret_access_key=conf.CLOUDFLARE_R2_SECRET_ACCESS_KEY,
            bucket=conf.CLOUDFLARE_R2_BUCKET_NAME,
            public_url=conf.CLOUDFLARE_R2_PUBLIC_URL,
        )

    @property
    def client(self):
        if self._s3 is None:
            if not (self.endpoint and self.bucket):
                raise StorageError("Object storage is not configured")
            self._s3 = boto3.client(
                "s3",
                region_name="auto",
                endpoint_url=self.endpoint,
                aws_access_key_id=self.access_key_id,
                aws_secret_access_key=self.secret_access_key,
                config=Config(s3={"addressing_style": "path"}),
            )
        return self._s3

    def upload(self, data: bytes, filename: str, content_type: str | None, folder: str = "uploads") -> StoredObject:
        key = f"{folder}/{uuid.uuid4()}.{_extension(filename)}"
        mimetype = content_type or "application/octet-stream"
        try:
            self.client.put_object(Bucket=self.bucket, Key=key, Body=data, ContentType=mimetype)
        except (BotoCoreError, ClientError) as exc:
            logger.error("R2 upload of %s failed: %s", key, exc)
            raise StorageError(f"Failed to upload to Cloudflare R2: {exc}") from exc
        logger.info("Uploaded %s (%d bytes)", key, len(data))
        return StoredObject(
            key=key,
            url=f"{self.public_url}/{key}",
            original_name=filename,
            size=len(data),
            mimetype=mimetype,
        )

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            logger.error("R2 delete of %s failed: %s", key, exc)
            raise StorageError(f"Failed to delete from Cloudflare R2: {exc}") from exc
        logger.info("Deleted %s", key)


@lru_cache
def get_storage() -> R2Storage:
    return R2Storage.from_settings(settings)
