from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, Optional


class TokenReader:
    """
    Whitespace-delimited tokens from a text stream, one line at a time.

    Tokens may be spread over several lines; discard_line() drops whatever is
    left on the line the most recent token came from.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._pending: Deque[str] = deque()
        self.line_number = 0

    def next_token(self) -> Optional[str]:
        """Return the next token, or None at end of input."""
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                return None
            self.line_number += 1
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        self._pending.clear()

    def __iter__(self) -> Iterator[str]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token
