from __future__ import annotations

"""backend/diagexplain/config/settings.py

Application configuration using environment-driven settings.

This module centralizes:
- service name / environment / log level
- CORS configuration
- default explanation shaping (reassurance, verbosity, enabled languages)
- optional extra rule file loaded at startup
- resolution tracing and Statsig telemetry
"""
import json
from functools import lru_cache
from typing import Annotated, Any, List, Literal

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
  app_name: str = "diagexplain-backend"
  environment: str = "development"
  log_level: str = "INFO"

  # CORS
  allowed_origins: List[AnyHttpUrl] = [
      "http://localhost:3000",
      "http://127.0.0.1:3000",
      "http://localhost:5173",
      "http://127.0.0.1:5173",
  ]

  # Default explanation shaping (callers may override per request)
  enable_reassurance: bool = True
  verbosity: Literal["short", "detailed"] = "detailed"
  # DIAGEXPLAIN_ENABLED_LANGUAGES accepts "typescript,java" or a JSON list
  enabled_languages: Annotated[List[str], NoDecode] = ["typescript", "javascript", "java"]

  # Reserved for future rule sources
  experimental: bool = False

  # JSON file with additional rule definitions, appended after the built-ins
  extra_rules_path: str | None = None

  # Emit classify/resolve trace events through the "diagexplain.trace" logger
  trace_resolution: bool = False

  # Telemetry
  statsig_server_secret: str | None = None

  @field_validator("enabled_languages", mode="before")
  @classmethod
  def _split_languages(cls, value: Any) -> Any:
    if isinstance(value, str):
      text = value.strip()
      if text.startswith("["):
        return json.loads(text)
      return [tag.strip() for tag in text.split(",") if tag.strip()]
    return value

  model_config = SettingsConfigDict(
      env_prefix="DIAGEXPLAIN_", env_file=".env", env_file_encoding="utf-8"
  )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Return a cached Settings instance."""
  return Settings()
