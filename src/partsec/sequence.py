"""
Parsers for single parts of arbitrary inputs.
"""

from typing import Any, Callable, TypeVar

from .core import primitive
from .core.matcher import Equals, MatcherLike, Predicate, as_matcher
from .parser import FnParser, Parser

__all__ = (
    "matching_part", "sample", "satisfy", "any_part", "eof", "letter", "digit"
)

A = TypeVar("A")


def matching_part(matcher: MatcherLike[A]) -> Parser[Any, A]:
    """
    Parses one part accepted by ``matcher`` and returns it. Fails with
    ``Err(EndOfInput())`` on exhausted input and with ``Err(Rejected(part))``
    if the part is not accepted.

    >>> from partsec.core.matcher import Equals
    >>> from partsec.sequence import matching_part

    >>> parser = matching_part(Equals("a"))

    >>> parser("ab")
    Ok('a', 'b')
    >>> parser("b")
    Err(Rejected(part='b'))
    >>> parser("")
    Err(EndOfInput())

    :param matcher: Matcher or predicate for parts
    """

    m = as_matcher(matcher)

    def matching_part(input: Any) -> Any:
        return primitive.one_matching_part(input, m)

    return FnParser(matching_part)


def sample(s: A) -> Parser[Any, A]:
    """
    Parses a part equal to ``s``.

    >>> from partsec.sequence import sample

    >>> sample(1)([1, 2])
    Ok(1, [2])

    :param s: Value to parse
    """

    return matching_part(Equals(s))


def satisfy(test: Callable[[A], bool]) -> Parser[Any, A]:
    """
    Parses a part for which ``test`` returns ``True``.

    >>> from partsec.sequence import satisfy

    >>> satisfy(str.isdigit)("123")
    Ok('1', '23')
    >>> satisfy(str.isdigit)("_?!")
    Err(Rejected(part='_'))

    :param test: Predicate for parts
    """

    return matching_part(Predicate(test))


def eof() -> Parser[Any, None]:
    """
    Succeeds at the end of the input.

    >>> from partsec.sequence import eof

    >>> eof()("")
    Ok(None, '')
    >>> eof()("a")
    Err(Rejected(part='a'))
    """

    return FnParser(primitive.end_of_input)


any_part: Parser[Any, Any] = FnParser(primitive.one_part)
letter: Parser[Any, str] = satisfy(str.isalpha).label("letter")
digit: Parser[Any, str] = satisfy(str.isdigit).label("digit")
