"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Listener
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=0, le=65535)

    # Logging; levels both uvicorn and the logging module understand
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        # PORT= behaves like PORT unset
        env_ignore_empty = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, v):
        return v.lower() if isinstance(v, str) else v


settings = Settings()
