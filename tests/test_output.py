from typing import Any, List, Tuple

import pytest

from partsec import (
    Both, EndOfInput, Expected, FatalError, NoMatch, ParseError, Position,
    Rejected, parse
)
from partsec.output import describe, fmt_pos
from partsec.primitive import fatal
from partsec.sequence import any_part, digit, letter, sample

a = sample("a")


def test_unwrap_value() -> None:
    r = parse(a + a, "aab")
    assert r.unwrap() == ("a", "a")
    assert r.rest.pos == Position(1, 3)


def test_parse_method() -> None:
    assert a.parse("a").unwrap() == "a"


def test_no_match() -> None:
    with pytest.raises(NoMatch) as err:
        parse(letter | digit, "?").unwrap()
    assert str(err.value) == (
        "at 1:1: no applicable alternative matched (expected letter or digit)"
    )
    assert err.value.loc == Position(1, 1)
    assert err.value.error == Both(Expected("letter"), Expected("digit"))


def test_no_match_without_position() -> None:
    with pytest.raises(NoMatch) as err:
        parse(a, "b", track_position=False).unwrap()
    assert str(err.value) == (
        "at 0: no applicable alternative matched (unexpected 'b')"
    )


def test_incomplete() -> None:
    r = parse(a, "a\nb", complete=True)
    with pytest.raises(NoMatch) as err:
        r.unwrap()
    assert str(err.value) == (
        "at 1:2: no applicable alternative matched (expected end of input)"
    )


def test_complete() -> None:
    assert parse(any_part.many(), "a\nb", complete=True).unwrap() == \
        ["a", "\n", "b"]


def test_fatal_error() -> None:
    p = a >> digit.commit(lambda e, i: "digit expected")
    with pytest.raises(FatalError) as err:
        parse(p, "ab").unwrap()
    assert isinstance(err.value, ParseError)
    assert err.value.error == "digit expected"
    assert err.value.loc == Position(1, 2)
    assert str(err.value) == "at 1:2: digit expected"


def test_fatal_error_on_later_line() -> None:
    p = sample("\n") >> a >> digit.commit(lambda e, i: "digit expected")
    with pytest.raises(FatalError) as err:
        parse(p, "\nab").unwrap()
    assert err.value.loc == Position(2, 2)
    assert str(err.value) == "at 2:2: digit expected"


def test_fatal_error_without_position() -> None:
    p = a >> a >> digit.commit(lambda e, i: "digit expected")
    with pytest.raises(FatalError) as err:
        parse(p, "aab", track_position=False).unwrap()
    assert str(err.value) == "at 2: digit expected"


def test_fatal_parser_is_located() -> None:
    with pytest.raises(FatalError) as err:
        parse(a >> fatal("stop"), "a\nb").unwrap()
    assert str(err.value) == "at 1:2: stop"


def test_parse_method_formats_location() -> None:
    with pytest.raises(NoMatch) as err:
        a.parse("b", fmt_loc=lambda loc: "line {}".format(loc.row)).unwrap()
    assert str(err.value).startswith("at line 1: ")


class Diagnostic:
    def __init__(self, text: str, pos: Position) -> None:
        self.text = text
        self.pos = pos

    def __str__(self) -> str:
        return self.text


def test_fatal_error_with_position() -> None:
    p = sample("\n") >> a >> digit.commit(
        lambda e, i: Diagnostic("digit expected", i.pos)
    )
    with pytest.raises(FatalError) as err:
        parse(p, "\nab").unwrap()
    assert str(err.value) == "at 2:2: digit expected"


DATA_DESCRIBE: List[Tuple[Any, str]] = [
    (None, "unexpected input"),
    (EndOfInput(), "unexpected end of input"),
    (Rejected("x"), "unexpected 'x'"),
    (Expected("digit"), "expected digit"),
    (Both(Expected("a"), Both(Expected("b"), Expected("c"))),
     "expected a or b or c"),
    (Both(Rejected("x"), EndOfInput()),
     "unexpected 'x' or unexpected end of input"),
    ("custom", "custom"),
]


@pytest.mark.parametrize("error, expected", DATA_DESCRIBE)
def test_describe(error: Any, expected: str) -> None:
    assert describe(error) == expected


def test_fmt_pos() -> None:
    assert fmt_pos(Position(3, 4)) == "3:4"
    assert fmt_pos(5) == "5"
    assert fmt_pos(None) == "None"
