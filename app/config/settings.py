"""
Application configuration settings.
Handles environment variables and application-wide settings.
"""
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application settings
    app_name: str = Field(default="Product Reviews API", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    app_description: str = Field(
        default="Product catalog with embedded customer reviews backed by MongoDB",
        validation_alias="APP_DESCRIPTION"
    )
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # Server settings
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    reload: bool = Field(default=True, validation_alias="RELOAD")

    # Database settings
    mongodb_url: str = Field(default="mongodb://localhost:27017", validation_alias="MONGODB_URL")
    database_name: str = Field(default="product_reviews_db", validation_alias="DATABASE_NAME")
    products_collection: str = Field(default="products", validation_alias="PRODUCTS_COLLECTION")

    # MongoDB connection settings
    server_selection_timeout_ms: int = Field(default=30000, validation_alias="MONGODB_SERVER_SELECTION_TIMEOUT_MS")
    connect_timeout_ms: int = Field(default=30000, validation_alias="MONGODB_CONNECT_TIMEOUT_MS")
    socket_timeout_ms: int = Field(default=30000, validation_alias="MONGODB_SOCKET_TIMEOUT_MS")
    max_pool_size: int = Field(default=10, validation_alias="MONGODB_MAX_POOL_SIZE")
    min_pool_size: int = Field(default=1, validation_alias="MONGODB_MIN_POOL_SIZE")
    retry_writes: bool = Field(default=True, validation_alias="MONGODB_RETRY_WRITES")
    direct_connection: bool = Field(default=False, validation_alias="MONGODB_DIRECT_CONNECTION")

    # Logging settings
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
