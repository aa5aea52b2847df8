from typing import (
    Any, Generic, Hashable, Iterator, Optional, Sequence, Tuple, TypeVar
)

from typing_extensions import Protocol, final, runtime_checkable

from .types import START, Position

P = TypeVar("P")
P_co = TypeVar("P_co", covariant=True)
I = TypeVar("I")


@runtime_checkable
class Input(Protocol[P_co]):
    def take_one_part(self) -> Optional[Tuple[P_co, Any]]:
        ...


def take_one_part(input: Any) -> Optional[Tuple[Any, Any]]:
    if isinstance(input, Input):
        return input.take_one_part()
    if len(input) == 0:
        return None
    return input[0], input[1:]


def _hash_input(input: Any) -> int:
    # unhashable sources, such as lists, hash by length only
    if isinstance(input, Hashable):
        return hash(input)
    return hash(len(input))


@final
class Span(Generic[P]):
    __slots__ = "src", "offset"

    def __init__(self, src: Sequence[P], offset: int = 0):
        self.src = src
        self.offset = offset

    def __repr__(self) -> str:
        return "Span({!r}, {!r})".format(self.src, self.offset)

    def __eq__(self, other: object) -> bool:
        if type(other) is Span:
            return self.rest == other.rest
        return NotImplemented

    def __hash__(self) -> int:
        return _hash_input(self.rest)

    def __len__(self) -> int:
        return max(len(self.src) - self.offset, 0)

    @property
    def rest(self) -> Sequence[P]:
        return self.src[self.offset:]

    def take_one_part(self) -> Optional[Tuple[P, "Span[P]"]]:
        if self.offset >= len(self.src):
            return None
        return self.src[self.offset], Span(self.src, self.offset + 1)


def _newline_of(input: Any) -> Any:
    src = input.src if type(input) is Span else input
    if isinstance(src, (bytes, bytearray)):
        return ord("\n")
    return "\n"


@final
class Positioned(Generic[I]):
    """
    Input decorator that tracks the row and column of the next part.

    >>> from partsec.core.input import Positioned

    >>> part, rest = Positioned("a\\nb").take_one_part()
    >>> part, rest.pos
    ('a', Position(row=1, col=2))
    >>> rest.take_one_part()[1].pos
    Position(row=2, col=1)

    Parts of ``bytes`` and ``bytearray`` sources are integers, so the newline
    part for them is ``ord("\\n")``.

    >>> src = Positioned(b"a\\nb")
    >>> src.take_one_part()[1].take_one_part()[1].pos
    Position(row=2, col=1)

    :param inner: Wrapped input
    :param pos: Position of the first part of ``inner``
    :param newline: Part that starts a new row, detected from ``inner`` by
        default
    """

    __slots__ = "inner", "pos", "newline"

    def __init__(
            self, inner: I, pos: Position = START,
            newline: Optional[Any] = None):
        self.inner = inner
        self.pos = pos
        if newline is None:
            newline = _newline_of(inner)
        self.newline = newline

    @classmethod
    def from_source(cls, src: Sequence[Any]) -> "Positioned[Span[Any]]":
        return cls(Span(src))

    def __repr__(self) -> str:
        return "Positioned({!r}, {!r})".format(self.inner, self.pos)

    def __eq__(self, other: object) -> bool:
        if type(other) is Positioned:
            return self.pos == other.pos and self.inner == other.inner
        return NotImplemented

    def __hash__(self) -> int:
        return hash((_hash_input(self.inner), self.pos))

    def __len__(self) -> int:
        return len(self.inner)  # type: ignore

    def take_one_part(self) -> Optional[Tuple[Any, "Positioned[I]"]]:
        taken = take_one_part(self.inner)
        if taken is None:
            return None
        part, rest = taken
        return part, Positioned(
            rest, self.pos.advance(part, self.newline), self.newline
        )


class PartsIter(Iterator[Any]):
    __slots__ = "rest",

    def __init__(self, input: Any):
        self.rest = input

    def __next__(self) -> Any:
        taken = take_one_part(self.rest)
        if taken is None:
            raise StopIteration
        part, self.rest = taken
        return part


def parts(input: Any) -> PartsIter:
    """
    Iterates over the parts of ``input``. The remainder after the last
    yielded part is available as ``rest`` attribute of the iterator.

    >>> from partsec.core.input import parts

    >>> "".join(parts("hello"))
    'hello'
    """

    return PartsIter(input)


def position_of(input: Any) -> Optional[Position]:
    if type(input) is Positioned:
        return input.pos
    return None


def offset_of(input: Any) -> Optional[int]:
    if type(input) is Positioned:
        return offset_of(input.inner)
    if type(input) is Span:
        return input.offset
    return None
