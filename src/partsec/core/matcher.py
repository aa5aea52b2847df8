from typing import Any, Callable, Generic, TypeVar, Union

from typing_extensions import Protocol, final, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Matcher(Protocol[T_contra]):
    def check(self, candidate: T_contra) -> bool:
        ...


@final
class Predicate(Generic[T]):
    __slots__ = "fn",

    def __init__(self, fn: Callable[[T], bool]):
        self.fn = fn

    def __repr__(self) -> str:
        return "Predicate({!r})".format(self.fn)

    def check(self, candidate: T) -> bool:
        return bool(self.fn(candidate))


@final
class Equals(Generic[T]):
    __slots__ = "sample",

    def __init__(self, sample: T):
        self.sample = sample

    def __repr__(self) -> str:
        return "Equals({!r})".format(self.sample)

    def check(self, candidate: T) -> bool:
        return bool(candidate == self.sample)


MatcherLike = Union[Matcher[T], Callable[[T], bool]]


def as_matcher(m: MatcherLike[Any]) -> Matcher[Any]:
    if isinstance(m, Matcher):
        return m
    if callable(m):
        return Predicate(m)
    raise TypeError("expected a matcher or a predicate, got {!r}".format(m))
