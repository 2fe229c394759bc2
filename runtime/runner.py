from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, TextIO

from explorer import ExplorerEnv, StepResult
from explorer.core.types import CommandType
from explorer.core.validation import parse_keyword
from infra.logger import get_logger

from .reader import TokenReader

log = get_logger(__name__)

# Diagnostic line written for each failure code
DIAGNOSTICS = {
    "INVALID_COMMAND": "Invalid command",
    "BLOCKED": "Blocked",
    "INCONSISTENT_MAP": "Inconsistent map",
}


@dataclass
class RunSummary:
    """
    Counters for one processed script.

    Attributes:
        committed: Commands (including the startup reveal) that changed the map view
        rejected: Commands that produced a diagnostic
        quit: True if the script ended with an explicit quit
    """
    committed: int = 0
    rejected: int = 0
    quit: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"committed": self.committed, "rejected": self.rejected, "quit": self.quit}


class ScriptRunner:
    """
    Feeds a movement script to an ExplorerEnv.

    Rendered maps go to `out`, one diagnostic line per rejected command to
    `err`.
    """

    def __init__(
        self,
        env: Optional[ExplorerEnv] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.env = env if env is not None else ExplorerEnv()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def run(self, lines: Iterable[str]) -> RunSummary:
        """
        Process a whole script until quit or end of input.

        Args:
            lines: Text lines (an open file, sys.stdin, a list of strings)

        Returns:
            RunSummary for the script
        """
        reader = TokenReader(lines)
        summary = RunSummary()

        if not self._startup(reader, summary):
            log.info("Input ended before a starting view was given")
            return summary

        while True:
            keyword = reader.next_token()
            if keyword is None:
                break

            command_type = parse_keyword(keyword)
            if command_type is None:
                self._report(self.env.execute(keyword), reader, summary)
                continue

            if command_type == CommandType.QUIT:
                self.env.execute(keyword)
                summary.quit = True
                break

            sequence = reader.next_token()
            if sequence is None:
                log.debug("Input ended after %r without a sequence", keyword)
                break

            self._report(self.env.execute(keyword, sequence), reader, summary)

        log.info("Script finished: %s", summary.to_dict())
        return summary

    # ------------------------------------------------------------------#
    # Helpers
    # ------------------------------------------------------------------#
    def _startup(self, reader: TokenReader, summary: RunSummary) -> bool:
        """Read tokens until one is a valid starting view."""
        for token in reader:
            result = self.env.reveal(token)
            self._report(result, reader, summary)
            if result.success:
                return True
        return False

    def _report(self, result: StepResult, reader: TokenReader, summary: RunSummary) -> None:
        if result.success:
            summary.committed += 1
            if result.rendered is not None:
                self.out.write(result.rendered)
            return

        summary.rejected += 1
        self.err.write(DIAGNOSTICS.get(result.failure_reason, result.message) + "\n")

        if result.failure_reason == "INVALID_COMMAND":
            log.debug("Discarding rest of line %d", reader.line_number)
            reader.discard_line()
