"""Platform shell selection.

The command string is handed to the shell as a single argument and is never
parsed, quoted or escaped here.  Whatever the caller sends is interpreted by
the shell exactly as if it had been typed at a prompt.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path

# os.name -> (program, flag that makes it run the next argument)
SHELLS: dict[str, tuple[str, str]] = {
    "nt": ("cmd", "/C"),
    "posix": ("sh", "-c"),
}

_PLATFORM_NAMES = {"darwin": "macos"}


def shell_argv(command: str, family: str | None = None) -> list[str]:
    """Argument vector that runs *command* through the platform shell."""
    program, flag = SHELLS.get(family or os.name, SHELLS["posix"])
    return [program, flag, command]


def working_directory() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return Path(".")


def platform_name() -> str:
    """Lower-case OS name, e.g. ``linux``, ``windows`` or ``macos``."""
    system = platform.system().lower()
    return _PLATFORM_NAMES.get(system, system)
