"""Tests for settings and the storage configuration they produce."""

from app.core.config import Settings
from app.storage.factory import StorageConfig


def test_storage_config_from_environment(monkeypatch):
    monkeypatch.setenv("S3_ENDPOINT", "http://minio:9000")
    monkeypatch.setenv("S3_ACCESS_KEY", "ak")
    monkeypatch.setenv("S3_SECRET_KEY", "sk")
    monkeypatch.setenv("S3_REGION", "eu-central-1")
    monkeypatch.setenv("S3_BUCKET", "uploads")

    settings = Settings(_env_file=None)

    assert settings.storage_configured is True
    assert settings.storage_config() == StorageConfig(
        endpoint="minio:9000",
        access_key="ak",
        secret_key="sk",
        region="eu-central-1",
        bucket="uploads",
        secure=False,
    )


def test_defaults_target_aws(monkeypatch):
    for name in ("S3_ENDPOINT", "S3_ACCESS_KEY", "S3_SECRET_KEY", "S3_REGION", "S3_BUCKET", "API_PREFIX"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.storage_configured is False
    assert settings.API_PREFIX == "/api/v1"
    config = settings.storage_config()
    assert config.endpoint == "s3.amazonaws.com"
    assert config.secure is True
    assert config.region == "us-east-1"
