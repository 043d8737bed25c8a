import re
import sys
from typing import Optional, TextIO

from atm.errors import ParseError

_INT_RE = re.compile(r"[+-]?[0-9]+")


class Console:
    """Line-oriented customer console over a pair of text streams.

    Defaults to the process stdin/stdout; tests pass ``io.StringIO`` objects.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def prompt(self, text: str) -> None:
        # no newline, so the customer types on the same line
        self.stdout.write(text)
        self.stdout.flush()

    def write_line(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("console input exhausted")
        return line.rstrip("\r\n")

    def read_int(self) -> int:
        text = self.read_line()
        stripped = text.strip()
        if not _INT_RE.fullmatch(stripped):
            raise ParseError(text)
        return int(stripped)
