"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.deps import get_file_gateway
from app.main import app
from app.services.files import FileGateway
from app.storage.contracts import NotFoundError, ObjectInfo
from app.storage.factory import StorageConfig


class InMemoryStorage:
    """ObjectStorage + Presigner fake keeping objects in a dict per bucket."""

    def __init__(self):
        self.objects: dict[tuple[str, str], tuple[bytes, str | None, datetime]] = {}
        self.calls: list[str] = []

    def put_bytes(self, bucket, key, data, *, content_type=None):
        self.calls.append("put")
        self.objects[(bucket, key)] = (data, content_type, datetime.now(timezone.utc))
        return f"{bucket}/{key}"

    def get_bytes(self, bucket, key):
        self.calls.append("get")
        try:
            return self.objects[(bucket, key)][0]
        except KeyError:
            raise NotFoundError("get", bucket, key, "The specified key does not exist.") from None

    def stat(self, bucket, key):
        self.calls.append("stat")
        try:
            data, content_type, modified = self.objects[(bucket, key)]
        except KeyError:
            raise NotFoundError("stat", bucket, key, "Object does not exist") from None
        return ObjectInfo(key=key, size=len(data), content_type=content_type, last_modified=modified)

    def list_objects(self, bucket):
        self.calls.append("list")
        return [
            ObjectInfo(key=key, size=len(data), content_type=None, last_modified=modified)
            for (b, key), (data, _, modified) in self.objects.items()
            if b == bucket
        ]

    def delete(self, bucket, key):
        self.calls.append("delete")
        self.objects.pop((bucket, key), None)

    def bucket_exists(self, bucket):
        self.calls.append("bucket_exists")
        return True

    def presign_get(self, bucket, key, ttl_seconds=3600):
        self.calls.append("presign")
        return f"https://storage.test/{bucket}/{key}?X-Amz-Expires={ttl_seconds}"


@pytest.fixture
def storage_config():
    return StorageConfig(
        endpoint="storage.test",
        access_key="ak",
        secret_key="sk",
        region="us-east-1",
        bucket="files",
    )


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def gateway(memory_storage, storage_config):
    return FileGateway(memory_storage, memory_storage, storage_config)


@pytest.fixture
def mock_storage():
    """Create a mock storage client."""
    storage = MagicMock()
    storage.get_bytes = MagicMock(return_value=b"test")
    storage.presign_get = MagicMock(return_value="https://signed-url")
    return storage


@pytest.fixture
def client(gateway):
    """TestClient with the file gateway bound to in-memory storage."""
    app.dependency_overrides[get_file_gateway] = lambda: gateway
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
