"""
Console number reader.

Reads whitespace-separated numbers from a text stream, re-prompting until the
requested count has been collected. Each token is parsed in the invariant
format first (Python float syntax, optional comma thousands grouping), then
with the locale-sensitive fallback.
"""

import locale
import re
import sys
from typing import Callable, List, Optional, TextIO

from regionbox_cli.logging import LogEvent, StructuredLogger, create_logger


# Digits grouped by commas in threes, e.g. "1,234,567.5" or "-12,000e3"
_GROUPED = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d*)?([eE][+-]?\d+)?$")


class InputExhausted(EOFError):
    """Input stream ended before enough numbers were read."""


def parse_invariant(token: str) -> Optional[float]:
    """Parse in the culture-independent format, or return None."""
    if "_" in token:
        return None
    if _GROUPED.match(token):
        token = token.replace(",", "")
    try:
        return float(token)
    except ValueError:
        return None


def parse_locale(token: str) -> Optional[float]:
    """Parse with the current LC_NUMERIC conventions, or return None."""
    try:
        return locale.atof(token)
    except ValueError:
        return None


class NumberReader:
    """
    Prompting reader for groups of numbers.

    Attributes:
        stdin: Stream lines are read from
        stdout: Stream prompts and hints are written to
        fallback: Parser tried when the invariant parse fails

    Example:
        >>> reader = NumberReader(io.StringIO("1 2\\n3\\n"), io.StringIO())
        >>> reader.read_numbers(3)
        [1.0, 2.0, 3.0]
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        fallback: Callable[[str], Optional[float]] = parse_locale,
        logger: Optional[StructuredLogger] = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.fallback = fallback
        self.logger = logger or create_logger("reader")

    def prompt(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def read_line(self) -> str:
        """
        Read one line without its newline.

        Raises:
            InputExhausted: At end of stream
        """
        line = self.stdin.readline()
        if line == "":
            self.logger.warning(
                event=LogEvent.INPUT_EXHAUSTED,
                message="Input stream ended",
            )
            raise InputExhausted("input ended before all values were read")
        return line.rstrip("\r\n")

    def parse_number(self, token: str) -> Optional[float]:
        # float() accepts digit separators; neither stage should
        if "_" in token:
            return None
        value = parse_invariant(token)
        if value is None:
            value = self.fallback(token)
        return value

    def read_numbers(self, count: int) -> List[float]:
        """
        Read exactly ``count`` numbers, spread over one or more lines.

        Unparsable tokens are reported and skipped. Tokens past ``count`` on
        the last line are ignored.

        Raises:
            InputExhausted: If the stream ends first
        """
        values: List[float] = []
        while len(values) < count:
            line = self.read_line()
            if not line.strip():
                self.logger.debug(event=LogEvent.INPUT_EMPTY, message="Blank input line")
                self.prompt("Input empty. Please enter numbers:")
                continue

            for token in line.split():
                if len(values) >= count:
                    break
                value = self.parse_number(token)
                if value is None:
                    self.logger.info(
                        event=LogEvent.INPUT_PARSE_FAILED,
                        message="Could not parse token",
                        metadata={'token': token},
                    )
                    self.prompt(f"Could not parse '{token}'. Enter a valid number.")
                    continue
                values.append(value)

            if len(values) < count:
                self.prompt(f"Need {count - len(values)} more number(s)...")

        return values
