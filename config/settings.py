from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Worker configuration using Pydantic for environment variables.

    Reads from environment variables, with an optional .env file for local dev.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    worker_id: str = Field(default="chunk-worker", description="Tag for log lines")

    # Azure Storage configuration
    azure_storage_connection_string: str | None = Field(
        default=None, description="Azure Blob Storage connection string"
    )
    upload_max_concurrency: int = Field(
        default=4, ge=1, description="Parallel connections used by blob uploads"
    )

    # Processing configuration
    file_chunk_size: int = Field(
        default=1024 * 1024, description="Chunk size in bytes when splitting input files"
    )
    csv_infer_schema_length: int = Field(
        default=10_000, description="Rows scanned by Polars to infer CSV column types"
    )

    @field_validator("file_chunk_size")
    @classmethod
    def _positive_chunk_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("file_chunk_size must be positive")
        return value


# Global settings instance
settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings
