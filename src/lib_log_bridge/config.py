"""Optional ``.env`` loading for the ``LOG_*`` configuration variables.

Loading is opt-in: either the CLI flag ``--use-dotenv`` or the environment
toggle :data:`DOTENV_ENV_VAR` asks for it. Existing environment variables are
never overridden.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_loaded_path: Path | None = None


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI choice wins.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalized = env_value.strip().lower()
    if normalized in _FALSY:
        return False
    return normalized in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from`` (default: cwd).

    Returns the resolved path of the loaded file, or ``None`` when none exists.
    Repeated calls load the file only once.
    """

    global _loaded_path
    if _loaded_path is not None:
        return _loaded_path
    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found).resolve() if found else None
    else:
        candidate = _find_upwards(search_from.resolve())
    if candidate is None:
        logger.debug("No .env file found")
        return None
    load_dotenv(candidate, override=False)
    _loaded_path = candidate
    logger.debug("Loaded environment from %s", candidate)
    return candidate


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _loaded_path
    _loaded_path = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
