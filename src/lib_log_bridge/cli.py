"""Click command line interface for the logging bridge.

Purpose
-------
Offer quick ways to look at the bridge from a shell: the metadata banner, the
level mapping table, and a demo that pushes one record per legacy level through
the facade into the Rich console.

Contents
--------
* :func:`cli` – root group with traceback and ``.env`` switches.
* ``info`` / ``levels`` / ``logdemo`` commands.
* :func:`main` – entry point delegating to :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

import os
from typing import Any, Sequence

import click
import lib_cli_exit_tools
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as config_module
from .adapters import ConfiguredBackend, RichConsoleAppender
from .domain import STANDARD_LEVELS, CustomLevelPolicy, LegacyLevel, LevelThresholds, LevelTranslator, LogLevel
from .runtime import build_registry, coerce_level, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_DEMO_CUSTOM_LEVEL = LegacyLevel("AUDIT", 950)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load LOG_* variables from the nearest .env before running commands.",
)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, version: bool) -> None:
    """Bridge a legacy logging facade to a Rich-backed backend."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--policy",
    type=click.Choice([policy.value for policy in CustomLevelPolicy]),
    default=CustomLevelPolicy.DEFAULT.value,
    show_default=True,
    help="Mapping policy for custom levels.",
)
@click.option(
    "--custom",
    "custom_levels",
    multiple=True,
    metavar="NAME=VALUE",
    help="Also show how a custom legacy level would be mapped.",
)
def cli_levels(policy: str, custom_levels: tuple[str, ...]) -> None:
    """Print the legacy to backend level mapping table."""

    translator = LevelTranslator(policy=CustomLevelPolicy.from_name(policy))
    table = Table(title=f"Legacy level mapping (custom policy: {policy})")
    table.add_column("legacy level")
    table.add_column("value", justify="right")
    table.add_column("backend level")
    table.add_column("kind")
    for level in (*reversed(STANDARD_LEVELS), *(_parse_custom_level(raw) for raw in custom_levels)):
        kind = "custom" if translator.is_custom(level) else "standard"
        table.add_row(level.name, str(level.value), translator.to_backend(level).name, kind)
    Console(soft_wrap=True).print(table)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--logger-name", default="demo", show_default=True, help="Name of the legacy logger to use.")
@click.option(
    "--root-level",
    default=LogLevel.TRACE.name.lower(),
    show_default=True,
    help="Backend threshold applied to the demo logger.",
)
@click.option(
    "--policy",
    type=click.Choice([policy.value for policy in CustomLevelPolicy]),
    default=CustomLevelPolicy.DEFAULT.value,
    show_default=True,
    help="Mapping policy for the custom AUDIT level.",
)
@click.option("--force-color/--no-force-color", default=False, help="Force ANSI colours.")
@click.option("--no-color", is_flag=True, default=False, help="Disable colours.")
def cli_logdemo(logger_name: str, root_level: str, policy: str, force_color: bool, no_color: bool) -> None:
    """Emit one record per legacy level (plus a custom one) to the console."""

    result = _logdemo(
        logger_name=logger_name,
        root_level=root_level,
        policy=policy,
        force_color=force_color,
        no_color=no_color,
    )
    click.echo(f"=== logdemo: logger {result['logger']!r}, root level {result['root_level']} ===")
    emitted = sum(1 for outcome in result["events"] if outcome.get("ok"))
    click.echo(f"emitted {emitted} of {len(result['events'])} records")


def _logdemo(
    *,
    logger_name: str,
    root_level: str,
    policy: str,
    force_color: bool,
    no_color: bool,
) -> dict[str, Any]:
    threshold = coerce_level(root_level)
    appender = RichConsoleAppender(force_color=force_color, no_color=no_color)
    backend = ConfiguredBackend(thresholds=LevelThresholds(root=threshold), appenders=[appender])
    registry = build_registry(backend, translator=LevelTranslator(policy=CustomLevelPolicy.from_name(policy)))
    handle = registry.get_logger(logger_name)

    events: list[dict[str, Any]] = []
    for level in STANDARD_LEVELS:
        if level.name in {"ALL", "OFF"}:
            continue
        events.append(handle.logp(level, __name__, "logdemo", "{0} message through the legacy facade", level.name))
    events.append(handle.logp(_DEMO_CUSTOM_LEVEL, __name__, "logdemo", "custom level {0}", _DEMO_CUSTOM_LEVEL.name))
    return {"logger": logger_name, "root_level": threshold.name, "events": events}


def _parse_custom_level(raw: str) -> LegacyLevel:
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"expected NAME=VALUE, got {raw!r}", param_hint="--custom")
    try:
        return LegacyLevel(name.strip(), int(value))
    except ValueError as exc:
        raise click.BadParameter(f"VALUE must be an integer in {raw!r}", param_hint="--custom") from exc


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :func:`lib_cli_exit_tools.run_cli` and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards so
    embedding callers keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
