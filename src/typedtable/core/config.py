"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ReaderConfig(BaseSettings):
    """Line loading and cell typing defaults."""

    model_config = {"env_prefix": "TYPEDTABLE_READER_"}

    encoding: str = "utf-8"
    default_cell_type: str = "int"  # int, float, decimal, bool, str


class ApiConfig(BaseSettings):
    """HTTP surface configuration."""

    model_config = {"env_prefix": "TYPEDTABLE_API_"}

    title: str = "typedtable"
    max_body_lines: int = 100_000


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "TYPEDTABLE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
