"""
Pytest configuration and fixtures for event-photo tests.
Provides environment setup, AWS mocking, DynamoDB and S3 fixtures with proper cleanup.
"""

import base64
import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

# Powertools reads these at import time of the handler modules
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "event-photo-service-test")
os.environ.setdefault("POWERTOOLS_DEV", "false")

TEST_REGION = "us-east-1"
TEST_BUCKET = "event-photos-test"
TEST_TABLE = "photos-test"
TEST_PUBLIC_URL = "https://photos.example.com"

TEST_ENV: dict[str, str] = {
    "AWS_REGION": TEST_REGION,
    "AWS_DEFAULT_REGION": TEST_REGION,
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "R2_ACCOUNT_ID": "test-account",
    "R2_ACCESS_KEY_ID": "test-r2-key",
    "R2_SECRET_ACCESS_KEY": "test-r2-secret",
    "R2_BUCKET_NAME": TEST_BUCKET,
    "R2_PUBLIC_URL": TEST_PUBLIC_URL,
    # Point the R2 client at the AWS hostname so moto intercepts it
    "R2_ENDPOINT_URL": f"https://s3.{TEST_REGION}.amazonaws.com",
    "R2_REGION": TEST_REGION,
    "PHOTO_METADATA_TABLE_NAME": TEST_TABLE,
}


@pytest.fixture(autouse=True)
def photo_env(monkeypatch) -> dict[str, str]:
    """Set a complete configuration and reset cached settings around each test."""
    from core.config import get_settings

    for name, value in TEST_ENV.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)

    get_settings.cache_clear()
    yield TEST_ENV
    get_settings.cache_clear()


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=TEST_REGION)


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the photos table for testing.

    moto discards the table when the mock context exits.
    """
    table = dynamodb_resource.create_table(
        TableName=TEST_TABLE,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
    )
    table.wait_until_exists()
    return table


@pytest.fixture
def dynamodb_put_item(dynamodb_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a single metadata record.

    Usage:
        item = dynamodb_put_item({"id": "p1", "storageKey": "events/e/photos/p1.jpg"})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        dynamodb_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def dynamodb_get_item(dynamodb_table) -> Callable[[str], dict[str, Any] | None]:
    """Helper to get a single metadata record by id."""

    def _get(photo_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = dynamodb_table.get_item(Key={"id": photo_id})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture
def dynamodb_scan(dynamodb_table) -> Callable[[], list[dict[str, Any]]]:
    """Helper returning every metadata record."""

    def _scan() -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = dynamodb_table.scan().get("Items", [])
        return items

    return _scan


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=TEST_REGION)


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """Create the photo bucket for testing."""
    try:
        s3_client.create_bucket(Bucket=TEST_BUCKET)
    except ClientError as e:
        if e.response["Error"]["Code"] != "BucketAlreadyOwnedByYou":
            raise

    return s3_client


@pytest.fixture
def s3_put_object(s3_bucket) -> Callable[..., dict[str, Any]]:
    """
    Helper to upload an object to the bucket.

    Usage:
        s3_put_object("events/e1/photos/p1.jpg", image_bytes, "image/jpeg")
    """

    def _put(key: str, body: bytes, content_type: str = "application/octet-stream"):
        return s3_bucket.put_object(
            Bucket=TEST_BUCKET, Key=key, Body=body, ContentType=content_type
        )

    return _put


@pytest.fixture
def s3_get_object(s3_bucket) -> Callable[[str], dict[str, Any]]:
    """Helper returning the raw get_object response with the body read."""

    def _get(key: str) -> dict[str, Any]:
        response: dict[str, Any] = s3_bucket.get_object(Bucket=TEST_BUCKET, Key=key)
        response["Data"] = response["Body"].read()
        return response

    return _get


@pytest.fixture
def s3_list_keys(s3_bucket) -> Callable[[], list[str]]:
    """Helper returning every object key in the bucket."""

    def _list() -> list[str]:
        response = s3_bucket.list_objects_v2(Bucket=TEST_BUCKET)
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _list


@pytest.fixture
def aws_backends(dynamodb_table, s3_bucket):
    """Both backends created inside one moto context."""
    return {"table": dynamodb_table, "s3": s3_bucket}


def build_multipart(
    *,
    fields: dict[str, str] | None = None,
    files: dict[str, tuple[str, str, bytes]] | None = None,
    boundary: str = "----EventPhotoBoundary7MA4YWxk",
) -> tuple[bytes, str]:
    """Encode a multipart/form-data body.

    ``files`` maps a field name to ``(file_name, content_type, data)``.
    Returns the body and the matching Content-Type header value.
    """
    parts: list[bytes] = []

    for name, value in (fields or {}).items():
        parts.append(
            (
                f"--{boundary}\r\n"
                f'Content-Disposition: form-data; name="{name}"\r\n\r\n'
                f"{value}\r\n"
            ).encode("utf-8")
        )

    for name, (file_name, content_type, data) in (files or {}).items():
        header = (
            f"--{boundary}\r\n"
            f'Content-Disposition: form-data; name="{name}"; filename="{file_name}"\r\n'
            f"Content-Type: {content_type}\r\n\r\n"
        ).encode("utf-8")
        parts.append(header + data + b"\r\n")

    parts.append(f"--{boundary}--\r\n".encode("utf-8"))

    return b"".join(parts), f"multipart/form-data; boundary={boundary}"


@pytest.fixture
def multipart_body() -> Callable[..., tuple[bytes, str]]:
    return build_multipart


@pytest.fixture
def upload_event_factory() -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway upload event.

    Usage:
        event = upload_event_factory(
            files={"photo": ("pic.jpg", "image/jpeg", b"...")},
            fields={"eventId": "evt1"},
        )
    """

    def _build(
        *,
        fields: dict[str, str] | None = None,
        files: dict[str, tuple[str, str, bytes]] | None = None,
        method: str = "POST",
    ) -> dict[str, Any]:
        body, content_type = build_multipart(fields=fields, files=files)
        return {
            "httpMethod": method,
            "path": "/upload",
            "headers": {"Content-Type": content_type},
            "body": base64.b64encode(body).decode("ascii"),
            "isBase64Encoded": True,
        }

    return _build


@pytest.fixture
def sample_png_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\x14\r\x0c\x0b\x0b\x0c\x19\x12\x13\x0f\x14\x1d\x1a\x1f\x1e\x1d\x1a\x1c"
        b"\x1c $.' \",#\x1c\x1c(7),01444\x1f'9=82<.342\xff\xc0\x00\x0b\x08"
        b"\x00\x01\x00\x01\x01\x01\x11\x00\xff\xc4\x00\x14\x00\x01\x00\x00\x00"
        b"\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\t\xff\xc4\x00\x14\x10"
        b"\x01\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


@pytest.fixture
def sample_photo_record() -> dict[str, Any]:
    """Single stored metadata record for testing."""
    return {
        "id": "photo-1",
        "storageKey": "events/evt1/photos/photo-1.jpg",
        "url": f"{TEST_PUBLIC_URL}/events/evt1/photos/photo-1.jpg",
        "eventId": "evt1",
        "fileName": "pic.jpg",
        "size": 100,
        "contentType": "image/jpeg",
        "uploadedAt": "2024-01-01T10:00:00+00:00",
    }
