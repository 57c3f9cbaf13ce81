"""Context handling built atop :mod:`contextvars`.

Purpose
-------
Carry string key/value pairs (request ids, tenant names, ...) alongside every
record emitted inside a scope, the way the legacy world uses a per-thread
context map. Values are stringified because the record context is a plain
``str -> str`` mapping.

Contents
--------
* :class:`ContextBinder` – stack manager with ``bind``/``current``/``clear``.

System Role
-----------
The emit use case merges :meth:`ContextBinder.current` into each record before
adding the legacy level name.
"""

from __future__ import annotations

from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Iterator, Mapping
import contextvars


def _normalise(fields: Mapping[str, Any]) -> dict[str, str]:
    result: dict[str, str] = {}
    for key, value in fields.items():
        if not key or not str(key).strip():
            raise ValueError("context keys must not be empty")
        if value is None:
            continue
        result[str(key)] = str(value)
    return result


class ContextBinder:
    """Manage context frames bound to the current execution flow."""

    _stack_var: contextvars.ContextVar[tuple[Mapping[str, str], ...]]

    def __init__(self) -> None:
        self._stack_var = contextvars.ContextVar("lib_log_bridge_context_stack", default=())

    @contextmanager
    def bind(self, **fields: Any) -> Iterator[Mapping[str, str]]:
        """Bind ``fields`` on top of the current frame for the ``with`` block.

        ``None`` values are ignored so callers can pass optional identifiers
        unconditionally.
        """

        stack = self._stack_var.get()
        merged = dict(stack[-1]) if stack else {}
        merged.update(_normalise(fields))
        frame = MappingProxyType(merged)
        token = self._stack_var.set(stack + (frame,))
        try:
            yield frame
        finally:
            self._stack_var.reset(token)

    def current(self) -> Mapping[str, str]:
        """Return the frame bound to the current scope (empty when none)."""

        stack = self._stack_var.get()
        return stack[-1] if stack else MappingProxyType({})

    def depth(self) -> int:
        return len(self._stack_var.get())

    def clear(self) -> None:
        """Remove all bound context information."""

        self._stack_var.set(())


__all__ = ["ContextBinder"]
