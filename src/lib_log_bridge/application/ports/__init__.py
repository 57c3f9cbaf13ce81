"""Protocols separating the bridge's application layer from its adapters."""

from __future__ import annotations

from .appender import AppenderPort
from .backend import AppendResult, BackendPort
from .caller import CallerResolverPort
from .time import ClockPort, IdProvider

__all__ = [
    "AppendResult",
    "AppenderPort",
    "BackendPort",
    "CallerResolverPort",
    "ClockPort",
    "IdProvider",
]
