"""AWS adapters."""

from toolbox.boundary.aws.s3_client import (
    S3ImageClient,
    generate_image_filename,
    upload_image_to_s3,
)

__all__ = ["S3ImageClient", "generate_image_filename", "upload_image_to_s3"]
