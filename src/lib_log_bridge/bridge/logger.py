"""Legacy logger handle forwarding to the backend.

Purpose
-------
Present the legacy facade's call surface (``log``, ``is_loggable``,
``get_level``, level helpers, ``logp``/``entering``/``exiting``/``throwing``)
while the backend keeps exclusive ownership of levels and hierarchy.

Contents
--------
* :class:`UnsupportedOperationError` – raised by the rejected mutators.
* :class:`ApiLogger` – per-name handle produced by
  :class:`~lib_log_bridge.bridge.registry.LoggerRegistry`.

System Role
-----------
Outermost layer for code written against the legacy API. Translation is
delegated to :class:`~lib_log_bridge.domain.translation.LevelTranslator`, the
record pipeline to :func:`~lib_log_bridge.application.use_cases.create_emit_record`.
"""

from __future__ import annotations

import traceback
from typing import Any, NoReturn

from lib_log_bridge.application.ports import BackendPort, CallerResolverPort
from lib_log_bridge.application.use_cases import EmitCallable, ProcessResult
from lib_log_bridge.domain import legacy_levels as legacy
from lib_log_bridge.domain.legacy_levels import LegacyLevel
from lib_log_bridge.domain.translation import LevelTranslator


GLOBAL_LOGGER_NAME = "global"
ROOT_LOGGER_NAME = ""

_MISSING: Any = object()


class UnsupportedOperationError(NotImplementedError):
    """The backend owns this aspect of logging; the facade cannot change it."""


class ApiLogger:
    """Handle for one logger name of the legacy facade.

    Every emitting method returns the diagnostic dictionary of the emit use
    case: ``{"ok": True, "event_id": ...}`` when a record was appended,
    ``{"ok": False, "reason": "level_disabled"}`` when the backend filtered it.
    """

    def __init__(
        self,
        name: str,
        *,
        backend: BackendPort,
        emit: EmitCallable,
        translator: LevelTranslator,
        caller_resolver: CallerResolverPort,
    ) -> None:
        self._name = name
        self._backend = backend
        self._emit = emit
        self._translator = translator
        self._caller_resolver = caller_resolver

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}>"

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def get_level(self) -> LegacyLevel:
        """Return the legacy view of the level the backend configures for this name."""

        return self._translator.to_legacy(self._backend.level_for(self._name))

    def is_loggable(self, level: LegacyLevel) -> bool:
        """Return the backend's emission decision for the translated ``level``."""

        return self._backend.is_enabled_for(self._name, self._translator.to_backend(level))

    def log(
        self,
        level: LegacyLevel,
        message: str,
        *params: Any,
        thrown: BaseException | None = None,
        caller: str | None = None,
    ) -> ProcessResult:
        """Log ``message`` at ``level``.

        Parameters
        ----------
        level:
            Standard or custom :class:`LegacyLevel`; custom levels never fail
            and are mapped by the translator's policy.
        message:
            Message text; ``{0}``-style placeholders are filled from ``params``.
        thrown:
            Optional exception whose traceback is attached to the record.
        caller:
            Fully-qualified name of the calling class. When omitted the
            injected caller resolver supplies it.
        """

        return self._emit(
            logger_name=self._name,
            level=self._translator.to_backend(level),
            legacy_level=level.name,
            message=_format_message(message, params),
            logger_fqcn=_FQCN,
            caller=caller,
            resolve_caller=self._caller_resolver.resolve,
            exc_info=_format_thrown(thrown),
        )

    def logp(
        self,
        level: LegacyLevel,
        source_class: str,
        source_method: str,
        message: str,
        *params: Any,
        thrown: BaseException | None = None,
    ) -> ProcessResult:
        """Log with ``source_class`` as the caller, skipping stack inspection.

        ``source_method`` is accepted for signature compatibility with the
        legacy API; records only carry the class.
        """

        return self.log(level, message, *params, thrown=thrown, caller=source_class)

    def severe(self, message: str, *params: Any, caller: str | None = None) -> ProcessResult:
        return self.log(legacy.SEVERE, message, *params, caller=caller)

    def warning(self, message: str, *params: Any, caller: str | None = None) -> ProcessResult:
        return self.log(legacy.WARNING, message, *params, caller=caller)

    def info(self, message: str, *params: Any, caller: str | None = None) -> ProcessResult:
        return self.log(legacy.INFO, message, *params, caller=caller)

    def config(self, message: str, *params: Any, caller: str | None = None) -> ProcessResult:
        return self.log(legacy.CONFIG, message, *params, caller=caller)

    def fine(self, message: str, *params: Any, caller: str | None = None) -> ProcessResult:
        return self.log(legacy.FINE, message, *params, caller=caller)

    def finer(self, message: str, *params: Any, caller: str | None = None) -> ProcessResult:
        return self.log(legacy.FINER, message, *params, caller=caller)

    def finest(self, message: str, *params: Any, caller: str | None = None) -> ProcessResult:
        return self.log(legacy.FINEST, message, *params, caller=caller)

    def entering(self, source_class: str, source_method: str, *params: Any) -> ProcessResult:
        """Log method entry at ``FINER`` as ``ENTRY`` followed by the parameters."""

        message = " ".join(["ENTRY", *(f"{{{index}}}" for index in range(len(params)))])
        return self.logp(legacy.FINER, source_class, source_method, message, *params)

    def exiting(self, source_class: str, source_method: str, result: Any = _MISSING) -> ProcessResult:
        """Log method return at ``FINER``, including ``result`` when given."""

        if result is _MISSING:
            return self.logp(legacy.FINER, source_class, source_method, "RETURN")
        return self.logp(legacy.FINER, source_class, source_method, "RETURN {0}", result)

    def throwing(self, source_class: str, source_method: str, thrown: BaseException) -> ProcessResult:
        """Log that ``thrown`` is being raised, at ``FINER``."""

        return self.logp(legacy.FINER, source_class, source_method, "THROW", thrown=thrown)

    def get_parent(self) -> NoReturn:
        raise UnsupportedOperationError("Cannot get the parent logger: the backend owns the logger hierarchy")

    def set_parent(self, parent: Any) -> NoReturn:
        raise UnsupportedOperationError("Cannot set the parent logger: the backend owns the logger hierarchy")

    def set_level(self, level: Any) -> NoReturn:
        raise UnsupportedOperationError("Cannot set the level: levels are configured in the backend")


_FQCN = f"{ApiLogger.__module__}.{ApiLogger.__qualname__}"


def _format_message(message: str, params: tuple[Any, ...]) -> str:
    # Any formatting failure keeps the raw text, as the legacy formatter does.
    if not params or "{" not in message:
        return message
    try:
        return message.format(*params)
    except Exception:
        return message


def _format_thrown(thrown: BaseException | None) -> str | None:
    if thrown is None:
        return None
    return "".join(traceback.format_exception(type(thrown), thrown, thrown.__traceback__))


__all__ = ["ApiLogger", "GLOBAL_LOGGER_NAME", "ROOT_LOGGER_NAME", "UnsupportedOperationError"]
