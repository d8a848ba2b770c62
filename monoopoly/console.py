"""Terminal input and output in the style of a whitespace-token stream."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_WORD = re.compile(r"\S+")

CLEAR_SCREEN = "\033[2J\033[H"
PAUSE_PROMPT = "Press any key to continue . . . "


class Console:
    """Reads words and lines from one stream and writes to another.

    A word read leaves the rest of its line pending, so a following
    ``read_line`` returns what remained after the word.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._rest: str | None = None

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _next_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def _skip_whitespace(self) -> str:
        while True:
            if self._rest is None:
                self._rest = self._next_line()
            rest = self._rest.lstrip()
            if rest:
                self._rest = rest
                return rest
            self._rest = None

    def _read_char(self) -> str:
        rest = self._skip_whitespace()
        self._rest = rest[1:]
        return rest[0]

    def read_token(self) -> str:
        """Read the next whitespace-delimited word."""
        rest = self._skip_whitespace()
        match = _WORD.match(rest)
        assert match is not None
        self._rest = rest[match.end():]
        return match.group()

    def read_line(self) -> str:
        """Read the rest of the current line, without leading spaces."""
        if self._rest is not None:
            line, self._rest = self._rest, None
        else:
            line = self._next_line()
        return line.lstrip(" ")

    def read_int(self) -> int:
        word = self.read_token()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"Invalid number: {word!r}") from None

    def ask_yes_or_no(self) -> bool:
        """Keep asking until 'y' or 'n' is entered; True means yes."""
        answer = self._read_char()
        while answer not in ("y", "n"):
            self.write("Invalid input! Only valid options are 'y' and 'n'\n")
            self.write("Enter input(y|n): ")
            answer = self._read_char()
        return answer == "y"

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    def pause(self) -> None:
        """Show a prompt and, on an interactive terminal, wait for Enter."""
        self.write(PAUSE_PROMPT)
        if self._stdin.isatty():
            self._stdin.readline()
        self.write("\n")