"""
S3 images bucket configuration.

Settings for the public bucket that stores generated featured images.
Accepts both S3_* and AWS_* environment variable names.

Dependencies: pydantic_settings
System role: S3 images bucket configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from toolbox.configs.base import BaseSettings


class S3ImagesSettings(BaseSettings):
    """Settings for S3 image uploads."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    bucket: str | None = Field(
        default=None,
        validation_alias=AliasChoices("S3_BUCKET_NAME", "AWS_S3_BUCKET_NAME"),
        description="S3 bucket for public images",
    )
    region: str = Field(
        default="us-east-2",
        validation_alias=AliasChoices("S3_REGION", "AWS_REGION"),
        description="AWS region for S3 bucket",
    )
    access_key_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("S3_ACCESS_KEY_ID", "AWS_ACCESS_KEY_ID"),
    )
    secret_access_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("S3_SECRET_ACCESS_KEY", "AWS_SECRET_ACCESS_KEY"),
    )
    key_prefix: str = Field(
        default="10ex-ai-toolbox",
        description="Key prefix for uploaded images",
    )
