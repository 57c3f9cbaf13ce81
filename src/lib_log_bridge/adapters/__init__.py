"""Adapters implementing the bridge's application ports."""

from __future__ import annotations

from .backend import ConfiguredBackend
from .caller import FixedCallerResolver, NullCallerResolver, StackCallerResolver
from .console import RichConsoleAppender
from .memory import ListAppender

__all__ = [
    "ConfiguredBackend",
    "FixedCallerResolver",
    "ListAppender",
    "NullCallerResolver",
    "RichConsoleAppender",
    "StackCallerResolver",
]
