from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from partsec import (
    EndOfInput, Equals, Err, Fatal, Matcher, Ok, Predicate, Rejected,
    as_matcher, end_of_input, matching_part, one_matching_part, one_part,
    sample
)


def test_one_part() -> None:
    assert one_part("abc") == Ok("a", "bc")
    assert one_part("") == Err(EndOfInput())


def test_one_matching_part() -> None:
    assert one_matching_part("123", str.isdigit) == Ok("1", "23")
    assert one_matching_part("_?!", str.isdigit) == Err(Rejected("_"))
    assert one_matching_part("", lambda _: True) == Err(EndOfInput())


def test_one_matching_part_with_matchers() -> None:
    assert one_matching_part("abc", Equals("a")) == Ok("a", "bc")
    assert one_matching_part("abc", Predicate(str.isupper)) == \
        Err(Rejected("a"))


class Vowel:
    def check(self, candidate: str) -> bool:
        return candidate in "aeiou"


def test_custom_matcher() -> None:
    assert isinstance(Vowel(), Matcher)
    assert as_matcher(Vowel()).check("e")
    assert matching_part(Vowel())("ex") == Ok("e", "x")
    assert matching_part(Vowel())("xe") == Err(Rejected("x"))


def test_as_matcher() -> None:
    m = as_matcher(str.isdigit)
    assert type(m) is Predicate
    assert m.check("1") and not m.check("a")
    e = Equals("a")
    assert as_matcher(e) is e
    with pytest.raises(TypeError):
        as_matcher(42)  # type: ignore


def test_matching_part_is_reusable() -> None:
    p = matching_part(Equals("a"))
    assert p("ab") == Ok("a", "b")
    assert p("ab") == Ok("a", "b")
    assert p("b") == Err(Rejected("b"))
    assert p("") == Err(EndOfInput())


def test_sample_on_lists() -> None:
    assert sample(1)([1, 2]) == Ok(1, [2])
    assert sample(1)([2]) == Err(Rejected(2))


def test_end_of_input() -> None:
    assert end_of_input("") == Ok(None, "")
    assert end_of_input("a") == Err(Rejected("a"))


@given(st.text())
def test_one_part_never_fatal(s: str) -> None:
    assert type(one_part(s)) is not Fatal


@given(st.text(), st.sampled_from([str.isdigit, str.isalpha, str.isspace]))
def test_one_matching_part_iff_predicate(s: str, test: Any) -> None:
    r = one_matching_part(s, test)
    if s and test(s[0]):
        assert r == Ok(s[0], s[1:])
    elif s:
        assert r == Err(Rejected(s[0]))
    else:
        assert r == Err(EndOfInput())
