"""
Configuration management for the Bookshelf API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    # A bare PORT wins over the prefixed variable, as on most PaaS hosts
    api_port: int = Field(
        default=3003,
        validation_alias=AliasChoices("PORT", "BOOKSHELF_API_PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True  # Serve the GraphiQL explorer on GET /graphql

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    # Store
    seed_data: bool = True  # Preload the sample authors and books at startup

    # Reproduce the historical addAuthor behaviour, which appended new
    # authors to the book sequence instead of the author sequence
    legacy_add_author: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "BOOKSHELF_"
        case_sensitive = False
        populate_by_name = True


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        api_port=settings.api_port,
        environment=settings.environment,
        legacy_add_author=settings.legacy_add_author,
    )
