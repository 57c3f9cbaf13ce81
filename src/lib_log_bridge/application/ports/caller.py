"""Port for strategies that attribute a record to its calling code."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CallerResolverPort(Protocol):
    """Return the fully-qualified name of the code that issued a log call."""

    def resolve(self) -> str | None:
        """Return the caller name or ``None`` when it cannot be determined."""


__all__ = ["CallerResolverPort"]
