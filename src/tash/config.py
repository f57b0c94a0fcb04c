"""Configuration management for tash."""

from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from .logging_utils import configure_logging
from .loop import DEFAULT_PROMPT
from .tokenizer import DEFAULT_DELIMITERS


class Settings(BaseSettings):
    """Application settings."""

    # Interaction
    prompt: str = Field(default=DEFAULT_PROMPT, description="Prompt shown before each line")
    interactive: Optional[bool] = Field(
        None, description="Use the terminal prompt; None detects a tty on stdin"
    )

    # Buffers
    line_buffer_size: int = Field(default=1024, gt=0, description="Initial line buffer capacity")
    token_buffer_size: int = Field(default=64, gt=0, description="Initial token buffer capacity")
    delimiters: str = Field(default=DEFAULT_DELIMITERS, min_length=1, description="Token delimiter characters")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    class Config:
        """Pydantic configuration."""

        env_prefix = "TASH_"
        case_sensitive = False
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings(**overrides: Any) -> Settings:
    """Get application settings.

    Args:
        overrides: Field values that take precedence over the environment

    Returns:
        Settings instance
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    settings = Settings(**values)

    configure_logging(settings.log_level)

    return settings
