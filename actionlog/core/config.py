"""
Application configuration for actionlog2csv.

Provides environment-aware settings with conservative defaults. Pipeline
sizing (worker count, channel capacity) and file decoding are configurable
so a run can be tuned without code changes.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PipelineSettings(BaseModel):
    """
    Settings for the extraction pipeline.

    Notes:
    - workers: default number of concurrent file workers.
    - path_queue_size: capacity of the path channel (0 means unbounded).
    - encoding / encoding_errors: how log files are decoded.
    - max_line_length: longest accepted line, counted in decoded characters
      rather than bytes (0 disables).
    """

    workers: int = Field(4, ge=1, description="Default number of worker threads")
    path_queue_size: int = Field(64, ge=0, description="Path channel capacity")
    encoding: str = Field("utf-8", description="Log file encoding")
    encoding_errors: str = Field(
        "replace",
        description="Decoding error policy passed to open(): 'strict', 'replace', ...",
    )
    max_line_length: int = Field(
        64 * 1024,
        ge=0,
        description="Lines with more decoded characters than this fail the file (0 disables the check)",
    )

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @field_validator("encoding_errors")
    @classmethod
    def check_encoding_errors(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            raise ValueError(f"unknown decoding error handler: {value}") from e
        return value


class Config(BaseSettings):
    """
    Global configuration with environment overrides.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACTIONLOG_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Default logging level")
    logs_dir: Path = Field(Path("logs"), description="Directory for log files")
    log_to_file: bool = Field(False, description="Also write logs to logs_dir")
    pipeline: PipelineSettings = PipelineSettings()

    def model_post_init(self, __context: object) -> None:
        if self.log_to_file:
            self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
