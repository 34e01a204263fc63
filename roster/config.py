"""
Configuration settings for the employee roster.

Uses Pydantic Settings to load environment variables (and an optional `.env`
file) for the data file location, write/parse behavior of the record store,
and logging.
"""
from __future__ import annotations

import codecs
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MalformedPolicy(str, Enum):
    """What the decoder does with a record block it cannot parse."""

    SKIP = "skip"
    ABORT = "abort"


class Settings(BaseSettings):
    # Storage
    data_file: Path = Field(Path("data/employee.txt"), alias="ROSTER_DATA_FILE")
    atomic_writes: bool = Field(True, alias="ROSTER_ATOMIC_WRITES")
    on_malformed: MalformedPolicy = Field(MalformedPolicy.SKIP, alias="ROSTER_ON_MALFORMED")
    encoding: str = Field("utf-8", alias="ROSTER_ENCODING")
    drop_malformed: bool = Field(False, alias="ROSTER_DROP_MALFORMED")

    # Logging
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="ROSTER_JSON_LOGS")
    log_file: Optional[Path] = Field(None, alias="ROSTER_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown text encoding {value!r}") from exc
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["MalformedPolicy", "Settings", "get_settings"]
