"""Application use cases orchestrating the bridge."""

from __future__ import annotations

from ._types import DiagnosticHook, EmitCallable, ProcessResult
from .emit import create_emit_record

__all__ = ["DiagnosticHook", "EmitCallable", "ProcessResult", "create_emit_record"]
