"""Environment-backed settings for the photo handlers.

Settings are read from the process environment on first use and cached for
the lifetime of the Lambda container. A failed load is not cached, so a
request made after the environment is fixed will succeed.
"""

import os
from functools import lru_cache

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field

from core.models.errors import ConfigurationError
from core.utils.constants import (
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_PHOTO_METADATA_TABLE_NAME,
    ENV_R2_ACCESS_KEY_ID,
    ENV_R2_ACCOUNT_ID,
    ENV_R2_BUCKET_NAME,
    ENV_R2_ENDPOINT_URL,
    ENV_R2_PUBLIC_URL,
    ENV_R2_REGION,
    ENV_R2_SECRET_ACCESS_KEY,
    R2_DEFAULT_REGION,
    R2_ENDPOINT_TEMPLATE,
)

logger = Logger(UTC=True)

STORAGE_ENV_VARS: tuple[str, ...] = (
    ENV_R2_ACCOUNT_ID,
    ENV_R2_ACCESS_KEY_ID,
    ENV_R2_SECRET_ACCESS_KEY,
    ENV_R2_BUCKET_NAME,
    ENV_R2_PUBLIC_URL,
)

METADATA_ENV_VARS: tuple[str, ...] = (
    ENV_PHOTO_METADATA_TABLE_NAME,
    ENV_AWS_REGION,
)


class StorageSettings(BaseModel):
    """Connection settings for the R2 (S3-compatible) bucket."""

    model_config = ConfigDict(frozen=True)

    account_id: str = Field(..., min_length=1)
    access_key_id: str = Field(..., min_length=1)
    secret_access_key: str = Field(..., min_length=1, repr=False)
    bucket_name: str = Field(..., min_length=1)
    public_url: str = Field(..., min_length=1)
    endpoint_url: str | None = None
    region: str = R2_DEFAULT_REGION

    @property
    def resolved_endpoint_url(self) -> str:
        return self.endpoint_url or R2_ENDPOINT_TEMPLATE.format(account_id=self.account_id)

    def public_url_for(self, key: str) -> str:
        """Return the public URL of an object key."""
        return f"{self.public_url.rstrip('/')}/{key}"


class MetadataSettings(BaseModel):
    """Connection settings for the photo metadata table."""

    model_config = ConfigDict(frozen=True)

    table_name: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    endpoint_url: str | None = None


class Settings(BaseModel):
    """Immutable view of every value the handlers need."""

    model_config = ConfigDict(frozen=True)

    storage: StorageSettings
    metadata: MetadataSettings


def _missing(names: tuple[str, ...]) -> list[str]:
    return [name for name in names if not os.getenv(name, "").strip()]


def load_settings() -> Settings:
    """Read and validate settings from the environment.

    Raises:
        ConfigurationError: If any required variable is missing or blank
    """
    missing_storage = _missing(STORAGE_ENV_VARS)
    if missing_storage:
        logger.error(
            "Missing R2 environment variables",
            extra={"missing": missing_storage},
        )
        raise ConfigurationError(
            message="Server configuration error - missing R2 credentials",
            details="R2 environment variables not properly configured",
            context={"missing": missing_storage},
        )

    missing_metadata = _missing(METADATA_ENV_VARS)
    if missing_metadata:
        logger.error(
            "Missing metadata store environment variables",
            extra={"missing": missing_metadata},
        )
        raise ConfigurationError(
            message="Server configuration error - missing metadata store configuration",
            details="Metadata store environment variables not properly configured",
            context={"missing": missing_metadata},
        )

    return Settings(
        storage=StorageSettings(
            account_id=os.environ[ENV_R2_ACCOUNT_ID],
            access_key_id=os.environ[ENV_R2_ACCESS_KEY_ID],
            secret_access_key=os.environ[ENV_R2_SECRET_ACCESS_KEY],
            bucket_name=os.environ[ENV_R2_BUCKET_NAME],
            public_url=os.environ[ENV_R2_PUBLIC_URL],
            endpoint_url=os.getenv(ENV_R2_ENDPOINT_URL) or None,
            region=os.getenv(ENV_R2_REGION) or R2_DEFAULT_REGION,
        ),
        metadata=MetadataSettings(
            table_name=os.environ[ENV_PHOTO_METADATA_TABLE_NAME],
            region=os.environ[ENV_AWS_REGION],
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL) or None,
        ),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first call."""
    return load_settings()
