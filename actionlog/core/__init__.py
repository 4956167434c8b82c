"""
Core module: Configuration, logging, and exception handling.
"""

from .config import Config, PipelineSettings, config
from .exceptions import (
    ActionLogError,
    ConfigurationError,
    ExtractionError,
    FileReadError,
    MalformedLineError,
    OutputWriteError,
    WalkError,
)

__all__ = [
    "Config",
    "PipelineSettings",
    "config",
    "ActionLogError",
    "ConfigurationError",
    "ExtractionError",
    "FileReadError",
    "MalformedLineError",
    "OutputWriteError",
    "WalkError",
]
