"""Line and number input helpers for the console menu."""

from __future__ import annotations

from typing import TextIO

from mytube.core.errors import InputParseError


class Prompter:
    """Reads answers from ``stdin`` after writing prompts to ``stdout``."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.exhausted = False

    def read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            self.exhausted = True
            return ""
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int | None:
        """Read an integer; empty input gives None, garbage reprompts."""

        while True:
            raw = self.read_line(prompt)
            try:
                return parse_int(raw)
            except InputParseError:
                self.stdout.write("Invalid number, try again\n")


def parse_int(raw: str) -> int | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InputParseError(f"Not a number: {raw!r}") from exc
