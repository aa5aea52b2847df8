from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from typing_extensions import Protocol

from .result import Err, Fatal, Ok, Result

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
C = TypeVar("C", bound="Extendable[Any]")


class Extendable(Protocol[T_contra]):
    def extend(self, items: Iterable[T_contra]) -> Any:
        ...


class _Collector(Iterator[Any]):
    __slots__ = "parse_fn", "rest", "fatal"

    def __init__(self, parse_fn: Callable[[Any], Result[Any, Any, Any]],
                 rest: Any):
        self.parse_fn = parse_fn
        self.rest = rest
        self.fatal: Optional[Fatal[Any]] = None

    def __next__(self) -> Any:
        r = self.parse_fn(self.rest)
        if type(r) is Ok:
            self.rest = r.rest
            return r.value
        if type(r) is Fatal:
            self.fatal = r
        elif type(r) is not Err:
            raise TypeError("expected a parse result, got {!r}".format(r))
        raise StopIteration


def collect_repeating(
        input: Any, parse_fn: Callable[[Any], Result[T, Any, Any]],
        container: Optional[C] = None) -> Result[C, Any, Any]:
    """
    Applies ``parse_fn`` until it fails and extends ``container`` with the
    parsed values. The first recoverable error ends the repetition
    successfully; the first fatal error becomes the result of the whole call.

    >>> from partsec.core.primitive import one_matching_part
    >>> from partsec.core.repeat import collect_repeating

    >>> collect_repeating("12a", lambda i: one_matching_part(i, str.isdigit))
    Ok(['1', '2'], 'a')

    :param input: Input to start from
    :param parse_fn: Parser for a single item
    :param container: Object with ``extend`` method, a new list by default
    """

    if container is None:
        container = []  # type: ignore
    collector = _Collector(parse_fn, input)
    container.extend(collector)  # type: ignore
    if collector.fatal is not None:
        return collector.fatal
    return Ok(container, collector.rest)
