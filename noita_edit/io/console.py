"""Line-based console used when the save path has to be typed in."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Console(Protocol):
    """Interface for prompting the user one line at a time."""

    def write_line(self, text: str) -> None:
        """Print a line of regular output."""

    def write_error(self, text: str) -> None:
        """Print a line of diagnostic output."""

    def read_line(self) -> str | None:
        """Read one line of input, or ``None`` once input is exhausted."""


class StdConsole:
    """``Console`` bound to the process standard streams."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr

    def write_line(self, text: str) -> None:
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def write_error(self, text: str) -> None:
        self._stderr.write(text + "\n")
        self._stderr.flush()

    def read_line(self) -> str | None:
        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")
