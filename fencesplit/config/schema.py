"""Configuration schema for fencesplit helpers."""

from pydantic import BaseModel, Field


class RetryConfig(BaseModel):
    """Exponential backoff defaults for retry_with_backoff."""
    max_attempts: int = Field(default=5, ge=1)
    base_delay_ms: int = Field(default=500, ge=0)


class IdConfig(BaseModel):
    length: int = Field(default=21, ge=1)


class Config(BaseModel):
    """Root configuration."""
    retry: RetryConfig = Field(default_factory=RetryConfig)
    ids: IdConfig = Field(default_factory=IdConfig)
