"""Legacy facade: logger handles and their registry."""

from __future__ import annotations

from .logger import GLOBAL_LOGGER_NAME, ROOT_LOGGER_NAME, ApiLogger, UnsupportedOperationError
from .registry import LoggerRegistry

__all__ = [
    "ApiLogger",
    "GLOBAL_LOGGER_NAME",
    "LoggerRegistry",
    "ROOT_LOGGER_NAME",
    "UnsupportedOperationError",
]
