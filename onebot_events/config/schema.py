"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from onebot_events.utils.text import PREVIEW_HEAD, PREVIEW_TAIL


class LoggingConfig(BaseModel):
    """Log output configuration."""
    level: str = "INFO"
    file: str | None = None  # Extra log file, e.g. "~/.onebot_events/decode.log"


class DescriptionConfig(BaseModel):
    """Preview bounds for event descriptions printed by the CLI."""
    preview_head: int = Field(default=PREVIEW_HEAD, ge=0)
    preview_tail: int = Field(default=PREVIEW_TAIL, ge=0)


class Config(BaseSettings):
    """Root configuration for onebot-events."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    description: DescriptionConfig = Field(default_factory=DescriptionConfig)

    model_config = SettingsConfigDict(
        env_prefix="ONEBOT_EVENTS_",
        env_nested_delimiter="__",
    )
