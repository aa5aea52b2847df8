"""
Parser combinators.
"""

from typing import Any, Callable, Optional, Tuple, TypeVar, Union

from .core import combinators
from .core.parser import ParseFn, ParseObj, to_fn
from .core.result import Expected, Result
from .output import Loc, ParseResult, fmt_pos, parse

I_contra = TypeVar("I_contra", contravariant=True)
I = TypeVar("I")
A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
C = TypeVar("C")

ParserLike = Union[ParseObj[I, A], ParseFn[I, A]]


class Parser(ParseObj[I_contra, A_co]):
    """
    Base class that attaches combinators to a parser. Instances are callable
    with an input and return a result.
    """

    def __call__(self, input: I_contra) -> Result[A_co, Any, Any]:
        return self.parse_fn(input)

    def parse(
            self, src: Any, *, track_position: bool = True,
            complete: bool = False,
            fmt_loc: Callable[[Loc], str] = fmt_pos) -> ParseResult[A_co]:
        """
        Alias for :func:`partsec.output.parse`.

        :param src: Sequence to parse
        :param track_position: Track row and column of the input
        :param complete: Require the parser to consume the whole input
        :param fmt_loc: Function that converts location to string
        """

        return parse(
            self, src, track_position=track_position, complete=complete,
            fmt_loc=fmt_loc
        )

    def fmap(self, fn: Callable[[A_co], B]) -> "FnParser[I_contra, B]":
        """
        Transforms the result of the parser by applying ``fn`` to it.

        >>> from partsec.sequence import satisfy

        >>> satisfy(str.isdigit).fmap(int)("1a")
        Ok(1, 'a')

        :param fn: Function to produce new value from the result of the parser
        """

        return fmap(self, fn)

    def bind(
            self, fn: Callable[[A_co], ParserLike[Any, B]]
    ) -> "FnParser[I_contra, B]":
        """
        Calls ``fn`` with the result of the parser and then applies the
        returned parser to the rest of the input.

        >>> from partsec.sequence import any_part, sample

        >>> parser = any_part.bind(sample)

        >>> parser("aab")
        Ok('a', 'b')
        >>> parser("ab")
        Err(Rejected(part='b'))

        :param fn: Function that returns a new parser using the result of this
            parser
        """

        return bind(self, fn)

    def __add__(
            self, other: ParserLike[Any, B]
    ) -> "FnParser[I_contra, Tuple[A_co, B]]":
        """
        Applies two parsers sequentially and returns a tuple of their results.

        >>> from partsec.sequence import sample

        >>> (sample("a") + sample("b"))("abc")
        Ok(('a', 'b'), 'c')

        :param other: Second parser
        """

        return seq(self, other)

    def then(
            self, other: ParserLike[Any, B]
    ) -> "FnParser[I_contra, Tuple[A_co, B]]":
        """
        Alias for :meth:`Parser.__add__`

        :param other: Second parser
        """

        return seq(self, other)

    def __lshift__(
            self, other: ParserLike[Any, B]) -> "FnParser[I_contra, A_co]":
        """
        Applies two parsers sequentially and returns the result of the first
        parser.

        >>> from partsec.sequence import sample

        >>> (sample("a") << sample("b"))("ab")
        Ok('a', '')

        :param other: Second parser
        """

        return seql(self, other)

    def __rshift__(
            self, other: ParserLike[Any, B]) -> "FnParser[I_contra, B]":
        """
        Applies two parsers sequentially and returns the result of the second
        parser.

        >>> from partsec.sequence import sample

        >>> (sample("a") >> sample("b"))("ab")
        Ok('b', '')

        :param other: Second parser
        """

        return seqr(self, other)

    def __or__(
            self, other: ParserLike[I_contra, B]
    ) -> "FnParser[I_contra, Union[A_co, B]]":
        """
        Applies the first parser and returns its' result unless it failed with
        a recoverable error. In this case the second parser is applied to the
        same input. If both fail, the error keeps both payloads. A fatal
        error of the first parser is returned as is.

        >>> from partsec.sequence import sample

        >>> parser = sample("a") | sample("b")

        >>> parser("b")
        Ok('b', '')
        >>> parser("c")
        Err(Both(first=Rejected(part='c'), second=Rejected(part='c')))

        :param other: Second parser
        """

        return alt(self, other)

    def __ror__(
            self, other: ParserLike[I_contra, B]
    ) -> "FnParser[I_contra, Union[A_co, B]]":
        return alt(other, self)

    def or_(
            self, other: ParserLike[I_contra, B]
    ) -> "FnParser[I_contra, Union[A_co, B]]":
        """
        Alias for :meth:`Parser.__or__`

        :param other: Second parser
        """

        return alt(self, other)

    def maybe(self) -> "FnParser[I_contra, Optional[A_co]]":
        """
        Applies the parser and returns ``None`` without consuming input if it
        failed with a recoverable error.

        >>> from partsec.sequence import sample

        >>> sample("a").maybe()("b")
        Ok(None, 'b')
        """

        return maybe(self)

    def many(
            self, container_factory: Callable[[], Any] = list
    ) -> "FnParser[I_contra, Any]":
        """
        Applies the parser until it fails and collects the parsed values into
        a container created by ``container_factory``. See
        :func:`partsec.core.repeat.collect_repeating`.

        >>> from partsec.sequence import satisfy

        >>> satisfy(str.isdigit).many()("12a")
        Ok(['1', '2'], 'a')

        :param container_factory: Function that creates an empty container
            with ``extend`` method
        """

        return many(self, container_factory)

    def label(self, expected: str) -> "FnParser[I_contra, A_co]":
        """
        Applies the parser, and replaces the payload of a recoverable error
        with ``Expected(expected)``. The label is also used as the name of the
        parser in the debug log.

        >>> from partsec.sequence import satisfy

        >>> satisfy(str.isdigit).label("digit")("a")
        Err(Expected(label='digit'))

        :param expected: Description of the expected input
        """

        return label(self, expected)

    def named(self, name: str) -> "FnParser[I_contra, A_co]":
        """
        Names the parser in the debug log of the ``partsec`` logger.

        :param name: Name of the parser
        """

        return FnParser(combinators.traced(self.to_fn(), name))

    def commit(
            self, make_error: Callable[[Any, Any], Any]
    ) -> "FnParser[I_contra, A_co]":
        """
        Applies the parser, and turns a recoverable error into a fatal one
        with the payload ``make_error(error, input)``. Use it after a prefix
        that unambiguously selects a grammar rule.

        >>> from partsec.sequence import sample

        >>> parser = sample("(") >> sample(")").commit(
        ...     lambda e, i: "unclosed bracket"
        ... )

        >>> (parser | sample("("))("(a")
        Fatal('unclosed bracket')

        :param make_error: Function that creates a fatal error payload from
            a recoverable error payload and the input
        """

        return commit(self, make_error)

    def sep_by(
            self, sep: ParserLike[Any, B]) -> "FnParser[I_contra, Any]":
        """
        Applies the parser zero or more times, with ``sep`` in between.
        Returns a list of the values parsed by the parser.

        >>> from partsec.sequence import sample

        >>> sample("a").sep_by(sample(","))("a,a,ab")
        Ok(['a', 'a', 'a'], 'b')

        :param sep: Separators parser
        """

        return sep_by(self, sep)

    def between(
            self, open: ParserLike[Any, B],
            close: ParserLike[Any, C]) -> "FnParser[Any, A_co]":
        """
        Applies ``open``, then the parser, then ``close``, and returns the
        value parsed by the parser.

        >>> from partsec.sequence import sample

        >>> sample("a").between(sample("("), sample(")"))("(a)")
        Ok('a', '')

        :param open: 'Opening bracket' parser
        :param close: 'Closing bracket' parser
        """

        return between(open, close, self)


class FnParser(Parser[I_contra, A_co]):
    """
    Wraps a plain parsing function into :class:`Parser`.

    :param fn: Function from input to result
    """

    def __init__(self, fn: ParseFn[I_contra, A_co]):
        self._fn = fn

    def __repr__(self) -> str:
        return "FnParser({!r})".format(self._fn)

    def to_fn(self) -> ParseFn[I_contra, A_co]:
        return self._fn

    def parse_fn(self, input: I_contra) -> Result[A_co, Any, Any]:
        return self._fn(input)


def fn_parser(fn: ParseFn[I, A]) -> FnParser[I, A]:
    """
    Decorator that turns a parsing function into :class:`Parser`.

    >>> from partsec import Ok, fn_parser, sample

    >>> @fn_parser
    ... def two(input):
    ...     return Ok(2, input)

    >>> (two + sample("a"))("ab")
    Ok((2, 'a'), 'b')
    """

    return FnParser(fn)


class Delay(Parser[I_contra, A_co]):
    """
    A subclass of :class:`Parser` to use as a forward declaration.

    >>> from partsec import Delay
    >>> from partsec.sequence import sample

    >>> parser = Delay()
    >>> parser.define((sample("a") + parser).maybe())

    >>> parser("aab").value
    ('a', ('a', None))
    """

    def __init__(self) -> None:
        def _fn(input: I_contra) -> Result[A_co, Any, Any]:
            raise RuntimeError("Delayed parser was not defined")

        self._defined = False
        self._fn: ParseFn[I_contra, A_co] = _fn

    def define(self, parser: ParserLike[I_contra, A_co]) -> None:
        """
        Define the parser.

        >>> from partsec import Delay
        >>> from partsec.sequence import sample

        >>> parser = Delay()
        >>> parser("a")
        Traceback (most recent call last):
          ...
        RuntimeError: Delayed parser was not defined

        >>> parser.define(sample("a"))
        >>> parser("a")
        Ok('a', '')

        :param parser: Parser definition
        """

        if self._defined:
            raise RuntimeError("Delayed parser was already defined")
        self._defined = True
        self._fn = to_fn(parser)

    def parse_fn(self, input: I_contra) -> Result[A_co, Any, Any]:
        return self._fn(input)


def fmap(parser: ParserLike[I, A], fn: Callable[[A], B]) -> FnParser[I, B]:
    """
    Function version of :meth:`Parser.fmap`

    :param parser: Parser
    :param fn: Function to produce new value from the result of the parser
    """

    return FnParser(combinators.fmap(to_fn(parser), fn))


def bind(
        parser: ParserLike[I, A],
        fn: Callable[[A], ParserLike[Any, B]]) -> FnParser[I, B]:
    """
    Function version of :meth:`Parser.bind`

    :param parser: Parser
    :param fn: Function that returns a new parser using the result of the
        parser
    """

    return FnParser(combinators.bind(to_fn(parser), fn))


def seq(
        parser: ParserLike[I, A],
        second: ParserLike[Any, B]) -> FnParser[I, Tuple[A, B]]:
    """
    Function version of :meth:`Parser.__add__`

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seq(to_fn(parser), to_fn(second)))


def seql(parser: ParserLike[I, A], second: ParserLike[Any, B]) -> FnParser[I, A]:
    """
    Function version of :meth:`Parser.__lshift__`

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seql(to_fn(parser), to_fn(second)))


def seqr(parser: ParserLike[I, A], second: ParserLike[Any, B]) -> FnParser[I, B]:
    """
    Function version of :meth:`Parser.__rshift__`

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seqr(to_fn(parser), to_fn(second)))


def alt(
        parser: ParserLike[I, A],
        second: ParserLike[I, B]) -> FnParser[I, Union[A, B]]:
    """
    Function version of :meth:`Parser.__or__`. Accepts plain parsing
    functions as well as :class:`Parser` instances.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.alt(to_fn(parser), to_fn(second)))


def maybe(parser: ParserLike[I, A]) -> FnParser[I, Optional[A]]:
    """
    Function version of :meth:`Parser.maybe`

    :param parser: Parser
    """

    return FnParser(combinators.maybe(to_fn(parser)))


def many(
        parser: ParserLike[Any, A],
        container_factory: Callable[[], Any] = list) -> FnParser[Any, Any]:
    """
    Function version of :meth:`Parser.many`

    :param parser: Parser for a single item
    :param container_factory: Function that creates an empty container
    """

    return FnParser(combinators.many(to_fn(parser), container_factory))


def label(parser: ParserLike[I, A], expected: str) -> FnParser[I, A]:
    """
    Function version of :meth:`Parser.label`

    :param parser: Parser
    :param expected: Description of the expected input
    """

    return FnParser(
        combinators.traced(
            combinators.label(to_fn(parser), Expected(expected)), expected
        )
    )


def commit(
        parser: ParserLike[I, A],
        make_error: Callable[[Any, I], Any]) -> FnParser[I, A]:
    """
    Function version of :meth:`Parser.commit`

    :param parser: Parser
    :param make_error: Function that creates a fatal error payload
    """

    return FnParser(combinators.commit(to_fn(parser), make_error))


def sep_by(
        parser: ParserLike[Any, A],
        sep: ParserLike[Any, B]) -> FnParser[Any, Any]:
    """
    Function version of :meth:`Parser.sep_by`

    :param parser: Parser
    :param sep: Separators parser
    """

    parse_fn = to_fn(parser)
    tail = combinators.many(combinators.seqr(to_fn(sep), parse_fn))
    return maybe(
        combinators.seq_h(parse_fn, tail, lambda x, xs: [x] + xs)
    ).fmap(lambda v: [] if v is None else v)


def between(
        open: ParserLike[Any, B], close: ParserLike[Any, C],
        parser: ParserLike[Any, A]) -> FnParser[Any, A]:
    """
    Function version of :meth:`Parser.between`

    :param open: 'Opening bracket' parser
    :param close: 'Closing bracket' parser
    :param parser: Parser
    """

    return FnParser(
        combinators.seqr(
            to_fn(open), combinators.seql(to_fn(parser), to_fn(close))
        )
    )
