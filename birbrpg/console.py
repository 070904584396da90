"""Text input and output for the game, with optional dramatic pauses."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, TextIO

_INT_PREFIX = re.compile(r"[+-]?\d+")


class Console:
    """Reads player input and writes narration to text streams."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        delay: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.delay = delay
        self._sleep = sleep

    def say(self, text: str) -> None:
        """Write text exactly as given."""
        self.stdout.write(text)
        self.stdout.flush()

    def pause(self, seconds: float) -> None:
        """Wait for a while, unless pauses are turned off."""
        if self.delay:
            self._sleep(seconds)

    def ellipsis(self, delay: float) -> None:
        """Write three dots one at a time, then end the line."""
        for dot in (".", ".", ".\n"):
            self.pause(delay)
            self.say(dot)

    def read_line(self) -> str:
        """Return the next input line without its line ending."""
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def ask_int(self) -> int:
        """Read the next non-blank line and parse the integer it starts with.

        Raises ValueError when the line does not start with an integer and
        EOFError when input runs out.
        """
        while True:
            stripped = self.read_line().strip()
            if stripped:
                break
        token = stripped.split()[0]
        match = _INT_PREFIX.match(token)
        if match is None:
            raise ValueError(f"not a number: {token!r}")
        return int(match.group())