"""Console appenders."""

from __future__ import annotations

from .rich_console import RichConsoleAppender

__all__ = ["RichConsoleAppender"]
