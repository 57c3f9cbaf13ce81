"""Static package metadata surfaced by the CLI and ``summary_info``.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_bridge"
title = "Bridge from a legacy logging facade to a Rich-backed logging backend"
version = "0.1.0"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_bridge"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner line by line through ``writer`` (default: ``print``)."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line + "\n")


__all__ = ["author", "author_email", "name", "print_info", "shell_command", "title", "version"]
