"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.storage.factory import StorageConfig, normalize_endpoint


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Object storage (AWS S3 or any S3-compatible endpoint)
    S3_ENDPOINT: str = "https://s3.amazonaws.com"
    S3_ACCESS_KEY: str = ""
    S3_SECRET_KEY: str = ""
    S3_REGION: str = "us-east-1"
    S3_BUCKET: str = "files"

    # Application
    APP_NAME: str = "S3 File API"
    APP_ENV: str = "dev"
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def storage_configured(self) -> bool:
        return bool(self.S3_ENDPOINT and self.S3_ACCESS_KEY and self.S3_SECRET_KEY)

    def storage_config(self) -> StorageConfig:
        host, secure = normalize_endpoint(self.S3_ENDPOINT)
        return StorageConfig(
            endpoint=host,
            access_key=self.S3_ACCESS_KEY,
            secret_key=self.S3_SECRET_KEY,
            region=self.S3_REGION,
            bucket=self.S3_BUCKET,
            secure=secure,
        )


# Global settings instance
settings = Settings()
