"""Command-line entry point: explorer [script_file]."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from infra.config import ExplorerSettings
from infra.logger import configure_logging, get_logger

from .runner import ScriptRunner

USAGE = "usage: explorer [script_file]"

log = get_logger(__name__)


class UsageError(Exception):
    """Raised instead of argparse's own exit so every misuse exits with status 1."""


class ExplorerArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = ExplorerArgumentParser(
        prog="explorer",
        usage="explorer [script_file]",
        description="Build a dungeon map from a movement script or standard input.",
    )
    parser.add_argument("scripts", nargs="*", metavar="script_file", help="Movement script (default: stdin)")
    parser.add_argument("--log-level", default=None, help="Override EXPLORER_LOG_LEVEL")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return parser


def load_settings(log_level: Optional[str]) -> ExplorerSettings:
    """Settings from the environment, with the command-line level applied (validated)."""
    settings = ExplorerSettings.from_env()
    if log_level:
        settings = ExplorerSettings.model_validate({**settings.model_dump(), "log_level": log_level})
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError as exc:
        sys.stderr.write(f"{exc}\n{USAGE}\n")
        return 1

    if len(args.scripts) > 1:
        sys.stderr.write(USAGE + "\n")
        return 1

    try:
        settings = load_settings(args.log_level)
    except ValidationError as exc:
        sys.stderr.write(f"Invalid configuration: {exc}\n{USAGE}\n")
        return 1

    configure_logging(
        settings.log_level,
        json=settings.log_json or args.json_logs,
        logfile=settings.logfile,
    )

    runner = ScriptRunner()

    if not args.scripts:
        # Undecodable bytes become replacement characters, i.e. invalid tokens
        reconfigure = getattr(sys.stdin, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="replace")
        runner.run(sys.stdin)
        return 0

    path = args.scripts[0]
    try:
        script = open(path, "r", encoding="utf-8", errors="replace")
    except OSError:
        sys.stderr.write(f"Can't open movement script: {path}\n{USAGE}\n")
        return 1

    with script:
        log.info("Reading movement script %s", path)
        runner.run(script)
    return 0


if __name__ == "__main__":
    sys.exit(main())
