from pairdist.parse import InvalidToken, ReadFailure, WrongTokenCount
from pairdist.util import format_diagnostic, pl


def test_can_pluralise():
    assert pl(0, "pair") == "pairs"
    assert pl(1, "pair") == "pair"
    assert pl(2, "pair") == "pairs"
    assert pl([1], "pair") == "pair"
    assert pl([1, 2], "entry", "entries") == "entries"


def test_can_format_diagnostics():
    assert format_diagnostic(WrongTokenCount(3, "7 8 9")) == (
        "Warning: Line 3 ('7 8 9') does not contain exactly two numbers"
        " separated by whitespace. Skipping."
    )
    assert format_diagnostic(InvalidToken(1, "second", "abc", "oops")) == (
        "Error: Failed to parse second number on line 1: 'abc' (oops)"
    )
    assert format_diagnostic(ReadFailure(2, "bad bytes")) == (
        "Error: Could not read line 2 from file: bad bytes"
    )
