import io
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from pairdist.static import (
    INT_MAX,
    INT_MIN,
    LEVEL_ERROR,
    LEVEL_WARNING,
    MAX_CONSECUTIVE_READ_FAILURES,
)

# A base-10 signed integer: an optional sign followed by ASCII digits. This is
# stricter than int(), which also accepts underscores, surrounding whitespace
# and non-ASCII digits.
_RE_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Pair:
    line_number: int
    left: int
    right: int


@dataclass(frozen=True)
class Blank:
    line_number: int


@dataclass(frozen=True)
class WrongTokenCount:
    line_number: int
    text: str

    level = LEVEL_WARNING

    @property
    def message(self):
        return (
            f"Line {self.line_number} ('{self.text}') does not contain exactly"
            " two numbers separated by whitespace. Skipping."
        )


@dataclass(frozen=True)
class InvalidToken:
    line_number: int
    position: str
    token: str
    reason: str

    level = LEVEL_ERROR

    @property
    def message(self):
        return (
            f"Failed to parse {self.position} number on line"
            f" {self.line_number}: '{self.token}' ({self.reason})"
        )


@dataclass(frozen=True)
class ReadFailure:
    line_number: int
    reason: str

    level = LEVEL_ERROR

    @property
    def message(self):
        return (
            f"Could not read line {self.line_number} from file:"
            f" {self.reason}"
        )


Skip = Union[WrongTokenCount, InvalidToken, ReadFailure]
LineOutcome = Union[Pair, Blank, Skip]


@dataclass
class ParseResult:
    left: list[int] = field(default_factory=list)
    right: list[int] = field(default_factory=list)
    diagnostics: list[Skip] = field(default_factory=list)

    @property
    def pairs(self):
        return len(self.left)

    def record(self, outcome: LineOutcome):
        if isinstance(outcome, Pair):
            self.left.append(outcome.left)
            self.right.append(outcome.right)
        elif not isinstance(outcome, Blank):
            self.diagnostics.append(outcome)


def parse_int(token: str) -> int:
    if not _RE_INTEGER.fullmatch(token):
        msg = "invalid digit found in string"
        raise ValueError(msg)
    value = int(token)
    if value > INT_MAX:
        msg = "number too large to fit in target type"
        raise ValueError(msg)
    if value < INT_MIN:
        msg = "number too small to fit in target type"
        raise ValueError(msg)
    return value


def parse_line(line_number: int, text: str) -> LineOutcome:
    """
    Classify a single line of input.

    A line is either blank, a valid pair of integers, or skipped with a
    reason. Nothing here raises for malformed input; the caller decides what
    to do with each outcome.
    """
    trimmed = text.strip()
    if not trimmed:
        return Blank(line_number)

    tokens = trimmed.split()
    if len(tokens) != 2:
        return WrongTokenCount(line_number, trimmed)

    values = []
    for position, token in zip(("first", "second"), tokens):
        try:
            values.append(parse_int(token))
        except ValueError as e:
            return InvalidToken(line_number, position, token, str(e))

    return Pair(line_number, *values)


def parse_lines(lines: Iterable[bytes]) -> ParseResult:
    """
    Parse raw lines into a pair of integer sequences.

    A line that cannot be read (an I/O error while fetching it) or decoded
    is recorded as a ReadFailure and counts towards the line numbering, and
    reading continues with the next line. Reading gives up after
    MAX_CONSECUTIVE_READ_FAILURES failed reads in a row, keeping whatever
    was parsed until then.
    """
    result = ParseResult()
    iterator = iter(lines)
    line_number = 0
    failures = 0
    while failures < MAX_CONSECUTIVE_READ_FAILURES:
        line_number += 1
        try:
            raw = next(iterator)
        except StopIteration:
            break
        except OSError as e:
            failures += 1
            result.record(ReadFailure(line_number, str(e)))
            continue
        failures = 0

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            result.record(ReadFailure(line_number, str(e)))
            continue
        result.record(parse_line(line_number, text))
    return result


def parse_text(text: str) -> ParseResult:
    return parse_lines(io.BytesIO(text.encode("utf-8")))


def read_pairs(path) -> ParseResult:
    # Only a failure to open the file propagates. Lines are read and decoded
    # one at a time, so a single bad line is reported and skipped.
    with open(path, "rb") as f:
        return parse_lines(f)
