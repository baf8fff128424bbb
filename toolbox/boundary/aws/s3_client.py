"""
S3 client for public image uploads.

Stores generated featured images under the configured key prefix with a
public-read ACL and returns their virtual-hosted URL.

Dependencies: boto3, toolbox.configs
System role: Image storage for SEO pages
"""

import asyncio
import base64
import binascii
import logging
import re
import time

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from toolbox.configs import get_settings

logger = logging.getLogger(__name__)


class S3ImageClient:
    """S3 client for the public images bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-2",
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        key_prefix: str = "10ex-ai-toolbox",
    ) -> None:
        """
        Initialize S3 client for the images bucket.

        Args:
            bucket: Bucket name
            region: AWS region of the bucket
            access_key_id: Explicit access key (default credential chain when None)
            secret_access_key: Explicit secret key
            key_prefix: Folder under which images are written
        """
        self._bucket = bucket
        self._region = region
        self._key_prefix = key_prefix.strip("/")
        self._s3_client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    def public_url(self, key: str) -> str:
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"

    def upload_image(self, data: bytes, filename: str, content_type: str = "image/png") -> str:
        """
        Upload image bytes and return the public URL.

        Raises:
            ClientError: If the upload is rejected
        """
        key = f"{self._key_prefix}/{filename}"
        self._s3_client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
            ACL="public-read",
        )
        return self.public_url(key)


def get_s3_image_client() -> S3ImageClient | None:
    """Build a client from settings; None when the bucket or keys are missing."""
    settings = get_settings().s3_images
    if not settings.bucket:
        logger.warning("S3_BUCKET_NAME or AWS_S3_BUCKET_NAME not configured, skipping S3 upload")
        return None
    if not settings.access_key_id or not settings.secret_access_key:
        logger.warning(
            "S3_ACCESS_KEY_ID and S3_SECRET_ACCESS_KEY (or AWS_ equivalents) not configured, "
            "skipping S3 upload"
        )
        return None
    return S3ImageClient(
        bucket=settings.bucket,
        region=settings.region,
        access_key_id=settings.access_key_id,
        secret_access_key=settings.secret_access_key,
        key_prefix=settings.key_prefix,
    )


async def upload_image_to_s3(
    base64_image: str,
    filename: str,
    content_type: str = "image/png",
) -> str | None:
    """
    Upload a base64 image (plain or data URI) and return its public URL.

    Never raises: returns None when S3 is not configured or the upload fails.

    Args:
        base64_image: Base64 payload, optionally prefixed "data:...;base64,"
        filename: Object name under the key prefix
        content_type: MIME type stored on the object

    Returns:
        Public URL, or None
    """
    client = get_s3_image_client()
    if client is None:
        return None

    payload = base64_image.split(",", 1)[1] if "," in base64_image else base64_image
    try:
        data = base64.b64decode(payload)
        url = await asyncio.to_thread(client.upload_image, data, filename, content_type)
    except (binascii.Error, BotoCoreError, ClientError) as e:
        logger.error("Error uploading image to S3", extra={"error": str(e), "filename": filename})
        return None

    logger.info("Image uploaded to S3", extra={"url": url})
    return url


def generate_image_filename(keyword: str, extension: str = "png") -> str:
    """"{slug}-{epoch_ms}.{ext}" with the same slug rules as page slugs."""
    slug = re.sub(r"[^a-z0-9]+", "-", keyword.lower()).strip("-")[:100]
    return f"{slug}-{int(time.time() * 1000)}.{extension}"
