"""
Primitive input-agnostic parsers.
"""

from typing import Any, Callable, TypeVar

from .core.result import Err, Fatal, Ok, Result
from .parser import FnParser, Parser

__all__ = ("Pure", "PureFn", "fail", "fatal")

I = TypeVar("I")
A_co = TypeVar("A_co", covariant=True)


class Pure(Parser[I, A_co]):
    """
    Parser that always succeeds, consumes no input, and returns constant value.

    >>> from partsec.primitive import Pure

    >>> Pure(0)("a")
    Ok(0, 'a')

    :param x: Value to return
    """

    def __init__(self, x: A_co):
        self._x = x

    def parse_fn(self, input: I) -> Result[A_co, I, Any]:
        return Ok(self._x, input)


class PureFn(Parser[I, A_co]):
    """
    Parser that always succeeds, consumes no input, and returns the result of
    function.

    >>> from partsec.primitive import PureFn

    >>> PureFn(lambda: list())("")
    Ok([], '')

    :param fn: Function that produces a value to return
    """

    def __init__(self, fn: Callable[[], A_co]):
        self._fn = fn

    def parse_fn(self, input: I) -> Result[A_co, I, Any]:
        return Ok(self._fn(), input)


def fail(error: Any = None) -> Parser[Any, Any]:
    """
    Parser that always fails with a recoverable error and consumes no input.

    >>> from partsec.primitive import fail

    >>> fail("nope")("a")
    Err('nope')

    :param error: Error payload
    """

    def fail(input: Any) -> Result[Any, Any, Any]:
        return Err(error)

    return FnParser(fail)


def fatal(error: Any) -> Parser[Any, Any]:
    """
    Parser that always fails with an unrecoverable error.

    >>> from partsec.primitive import fatal

    >>> fatal("broken")("a")
    Fatal('broken')

    :param error: Error payload
    """

    def fatal(input: Any) -> Result[Any, Any, Any]:
        return Fatal(error, input)

    return FnParser(fatal)
