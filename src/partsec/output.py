"""
Running parsers and reporting their results.
"""

from typing import Any, Callable, Generic, List, TypeVar, Union

from .core.input import Positioned, Span, offset_of, position_of
from .core.parser import to_fn
from .core.primitive import end_of_input
from .core.result import (
    Both, EndOfInput, Err, Expected, Fatal, Ok, Rejected, Result
)
from .core.types import Position

__all__ = ("ParseError", "NoMatch", "FatalError", "ParseResult", "parse")

V_co = TypeVar("V_co", covariant=True)

Loc = Union[Position, int, None]


def fmt_pos(loc: Loc) -> str:
    if type(loc) is Position:
        return "{}:{}".format(loc.row, loc.col)
    return repr(loc)


def _flatten(error: Any) -> List[Any]:
    if type(error) is Both:
        return _flatten(error.first) + _flatten(error.second)
    if error is None:
        return []
    return [error]


def describe(error: Any) -> str:
    """
    Human-readable description of a recoverable error payload.

    >>> from partsec.core.result import Both, EndOfInput, Expected, Rejected
    >>> from partsec.output import describe

    >>> describe(Rejected("x"))
    "unexpected 'x'"
    >>> describe(Both(Expected("digit"), Expected("letter")))
    'expected digit or letter'
    >>> describe(Both(EndOfInput(), Expected("'a'")))
    "unexpected end of input or expected 'a'"
    """

    items = _flatten(error)
    if not items:
        return "unexpected input"
    if all(type(item) is Expected for item in items):
        return "expected " + " or ".join(item.label for item in items)
    descriptions = []
    for item in items:
        if type(item) is EndOfInput:
            descriptions.append("unexpected end of input")
        elif type(item) is Rejected:
            descriptions.append("unexpected {!r}".format(item.part))
        elif type(item) is Expected:
            descriptions.append("expected {}".format(item.label))
        else:
            descriptions.append(str(item))
    return " or ".join(descriptions)


class ParseError(Exception):
    """
    Base class of exceptions raised by :meth:`ParseResult.unwrap`.

    :param loc: Location of the error
    :param fmt_loc: Function that converts location to string
    """

    def __init__(self, loc: Loc, fmt_loc: Callable[[Loc], str] = fmt_pos):
        super().__init__(loc)
        self.loc = loc
        self._fmt_loc = fmt_loc

    @property
    def msg(self) -> str:
        return "parse error"

    def __str__(self) -> str:
        if self.loc is None:
            return self.msg
        return "at {}: {}".format(self._fmt_loc(self.loc), self.msg)


class NoMatch(ParseError):
    """
    Raised when no applicable alternative matched the input.

    :param loc: Location of the error
    :param error: Payload of the recoverable error
    """

    def __init__(
            self, loc: Loc, error: Any,
            fmt_loc: Callable[[Loc], str] = fmt_pos):
        super().__init__(loc, fmt_loc)
        self.error = error

    @property
    def msg(self) -> str:
        return "no applicable alternative matched ({})".format(
            describe(self.error)
        )


class FatalError(ParseError):
    """
    Raised when the parser reported an unrecoverable error.

    :param loc: Location of the error
    :param error: Payload of the fatal error
    """

    def __init__(
            self, loc: Loc, error: Any,
            fmt_loc: Callable[[Loc], str] = fmt_pos):
        super().__init__(loc, fmt_loc)
        self.error = error

    @property
    def msg(self) -> str:
        return str(self.error)


def _loc(input: Any) -> Loc:
    pos = position_of(input)
    if pos is not None:
        return pos
    return offset_of(input)


class ParseResult(Generic[V_co]):
    """
    Result of running a parser with :func:`parse`.

    :param result: Result returned by the parser
    :param input: Input that was passed to the parser
    """

    def __init__(
            self, result: Result[V_co, Any, Any], input: Any,
            fmt_loc: Callable[[Loc], str] = fmt_pos):
        self.result = result
        self.input = input
        self._fmt_loc = fmt_loc

    def __repr__(self) -> str:
        return "ParseResult({!r})".format(self.result)

    @property
    def rest(self) -> Any:
        if type(self.result) is Ok:
            return self.result.rest
        return None

    def unwrap(self) -> V_co:
        """
        Returns parsed value if there is one. Otherwise raises
        :exc:`NoMatch` or :exc:`FatalError`.
        """

        r = self.result
        if type(r) is Ok:
            return r.value
        if type(r) is Fatal:
            loc = getattr(r.error, "pos", None)
            if loc is None and r.input is not None:
                loc = _loc(r.input)
            if loc is None:
                loc = _loc(self.input)
            raise FatalError(loc, r.error, self._fmt_loc)
        raise NoMatch(_loc(self.input), r.error, self._fmt_loc)


def parse(
        parser: Any, src: Any, *, track_position: bool = True,
        complete: bool = False,
        fmt_loc: Callable[[Loc], str] = fmt_pos) -> ParseResult[Any]:
    """
    Runs ``parser`` on ``src``.

    >>> from partsec.output import parse
    >>> from partsec.sequence import sample

    >>> parse(sample("a"), "ab").unwrap()
    'a'
    >>> parse(sample("a"), "ab", complete=True).result
    Err(Expected(label='end of input'))
    >>> parse(sample("a"), "b").result
    Err(Rejected(part='b'))

    :param parser: Parser to run
    :param src: Sequence to parse
    :param track_position: Wrap ``src`` into :class:`Positioned` to report
        errors as ``row:col``; offsets are reported otherwise
    :param complete: Require the parser to consume the whole input
    :param fmt_loc: Function that converts location to string
    """

    input: Any = Span(src)
    if track_position:
        input = Positioned(input)
    r = to_fn(parser)(input)
    if complete and type(r) is Ok and type(end_of_input(r.rest)) is Err:
        return ParseResult(Err(Expected("end of input")), r.rest, fmt_loc)
    return ParseResult(r, input, fmt_loc)
