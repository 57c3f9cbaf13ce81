"""Caller resolution strategies implementing :class:`CallerResolverPort`.

Purpose
-------
Attribute a record to the code that called the legacy facade when the caller
did not say so explicitly (``logp``/``entering``/``caller=`` do).

Contents
--------
* :class:`StackCallerResolver` – first frame outside the skipped packages.
* :class:`NullCallerResolver` – disables attribution.
* :class:`FixedCallerResolver` – always reports the same name.

System Role
-----------
Injected into every :class:`~lib_log_bridge.bridge.logger.ApiLogger` by the
registry, so attribution stays swappable without touching the facade.
"""

from __future__ import annotations

import inspect
from types import FrameType
from typing import Sequence

from lib_log_bridge.application.ports.caller import CallerResolverPort

_PACKAGE = __name__.partition(".")[0]


class StackCallerResolver(CallerResolverPort):
    """Walk the stack and describe the first frame outside ``skip_packages``.

    Frames belonging to a class report ``module.Class``; module-level code and
    plain functions report the module name.
    """

    def __init__(self, *, skip_packages: Sequence[str] = (_PACKAGE,)) -> None:
        self._skip_packages = tuple(skip_packages)

    def resolve(self) -> str | None:
        frame = inspect.currentframe()
        try:
            while frame is not None:
                module = frame.f_globals.get("__name__", "")
                if not self._is_skipped(module):
                    return _describe(frame, module)
                frame = frame.f_back
            return None
        finally:
            del frame

    def _is_skipped(self, module: str) -> bool:
        return any(module == package or module.startswith(package + ".") for package in self._skip_packages)


class NullCallerResolver(CallerResolverPort):
    """Never attribute records; avoids stack inspection entirely."""

    def resolve(self) -> str | None:
        return None


class FixedCallerResolver(CallerResolverPort):
    """Report ``caller`` for every record (useful for generated code)."""

    def __init__(self, caller: str) -> None:
        self._caller = caller

    def resolve(self) -> str | None:
        return self._caller


def _describe(frame: FrameType, module: str) -> str:
    qualname = getattr(frame.f_code, "co_qualname", frame.f_code.co_name)
    owner, _, _ = qualname.rpartition(".")
    if owner and "<locals>" not in owner:
        return f"{module}.{owner}"
    owner_type = _owner_from_locals(frame)
    if owner_type is not None:
        return f"{owner_type.__module__}.{owner_type.__qualname__}"
    return module


def _owner_from_locals(frame: FrameType) -> type | None:
    candidate = frame.f_locals.get("self")
    if candidate is not None:
        return type(candidate)
    cls = frame.f_locals.get("cls")
    if isinstance(cls, type):
        return cls
    return None


__all__ = ["FixedCallerResolver", "NullCallerResolver", "StackCallerResolver"]
