import logging
from typing import Any, Callable, Optional, Tuple, TypeVar, Union

from .parser import ParseFn, ParseObj, to_fn
from .repeat import collect_repeating
from .result import Both, Err, Fatal, Ok, Result

I = TypeVar("I")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

log = logging.getLogger("partsec")


def fmap(parse_fn: ParseFn[I, A], fn: Callable[[A], B]) -> ParseFn[I, B]:
    def fmap(input: I) -> Result[B, Any, Any]:
        return parse_fn(input).fmap(fn)

    return fmap


def alt(
        parse_fn: ParseFn[I, A],
        second_fn: ParseFn[I, B]) -> ParseFn[I, Union[A, B]]:
    def alt(input: I) -> Result[Union[A, B], Any, Any]:
        ra = parse_fn(input)
        if type(ra) is not Err:
            return ra
        rb = second_fn(input)
        if type(rb) is not Err:
            return rb
        return Err(Both(ra.error, rb.error))

    return alt


def bind(
        parse_fn: ParseFn[I, A],
        fn: Callable[[A], Union[ParseObj[Any, B], ParseFn[Any, B]]]
) -> ParseFn[I, B]:
    def bind(input: I) -> Result[B, Any, Any]:
        return parse_fn(input).and_then(lambda v, rest: to_fn(fn(v))(rest))

    return bind


def seq_h(
        parse_fn: ParseFn[I, A], second_fn: ParseFn[Any, B],
        merge: Callable[[A, B], C]) -> ParseFn[I, C]:
    def seq(input: I) -> Result[C, Any, Any]:
        return parse_fn(input).and_then(
            lambda va, rest: second_fn(rest).fmap(lambda vb: merge(va, vb))
        )

    return seq


def seql(parse_fn: ParseFn[I, A], second_fn: ParseFn[Any, B]) -> ParseFn[I, A]:
    return seq_h(parse_fn, second_fn, lambda l, _: l)


def seqr(parse_fn: ParseFn[I, A], second_fn: ParseFn[Any, B]) -> ParseFn[I, B]:
    return seq_h(parse_fn, second_fn, lambda _, r: r)


def seq(
        parse_fn: ParseFn[I, A],
        second_fn: ParseFn[Any, B]) -> ParseFn[I, Tuple[A, B]]:
    return seq_h(parse_fn, second_fn, lambda l, r: (l, r))


def maybe(parse_fn: ParseFn[I, A]) -> ParseFn[I, Optional[A]]:
    def maybe(input: I) -> Result[Optional[A], Any, Any]:
        r = parse_fn(input)
        if type(r) is Err:
            return Ok(None, input)
        return r

    return maybe


def many(
        parse_fn: ParseFn[Any, A],
        container_factory: Callable[[], Any] = list) -> ParseFn[Any, Any]:
    def many(input: Any) -> Result[Any, Any, Any]:
        return collect_repeating(input, parse_fn, container_factory())

    return many


def label(parse_fn: ParseFn[I, A], error: Any) -> ParseFn[I, A]:
    def label(input: I) -> Result[A, Any, Any]:
        r = parse_fn(input)
        if type(r) is Err:
            return Err(error)
        return r

    return label


def commit(
        parse_fn: ParseFn[I, A],
        make_error: Callable[[Any, I], Any]) -> ParseFn[I, A]:
    def commit(input: I) -> Result[A, Any, Any]:
        r = parse_fn(input)
        if type(r) is Err:
            return Fatal(make_error(r.error, input), input)
        return r

    return commit


def traced(parse_fn: ParseFn[I, A], name: str) -> ParseFn[I, A]:
    def traced(input: I) -> Result[A, Any, Any]:
        if not log.isEnabledFor(logging.DEBUG):
            return parse_fn(input)
        log.debug("trying %s at %r", name, input)
        r = parse_fn(input)
        log.debug("%s -> %r", name, r)
        return r

    return traced
