"""Run the agent with uvicorn: ``python -m machine_agent``."""

from __future__ import annotations

import uvicorn

from machine_agent import __version__
from machine_agent.config import Settings, settings
from machine_agent.services.error_log import log_file_path

BANNER = r"""
 __  __            _     _                                        _
|  \/  | __ _  ___| |__ (_)_ __   ___      __ _  __ _  ___ _ __ | |_
| |\/| |/ _` |/ __| '_ \| | '_ \ / _ \    / _` |/ _` |/ _ \ '_ \| __|
| |  | | (_| | (__| | | | | | | |  __/   | (_| | (_| |  __/ | | | |_
|_|  |_|\__,_|\___|_| |_|_|_| |_|\___|    \__,_|\__, |\___|_| |_|\__|
                                                |___/
"""


def print_banner(cfg: Settings) -> None:
    print(BANNER)
    print(f"  v{__version__}  listening on {cfg.agent_host}:{cfg.agent_port}")
    print(f"  Error logs will be written to: {log_file_path(cfg)}\n")


def main() -> None:
    if settings.agent_show_banner:
        print_banner(settings)
    uvicorn.run(
        "machine_agent.main:app",
        host=settings.agent_host,
        port=settings.agent_port,
        log_level=settings.agent_log_level.lower(),
    )


if __name__ == "__main__":
    main()
