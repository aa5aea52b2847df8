from abc import abstractmethod
from typing import Any, Callable, Generic, TypeVar

from .result import Result

I_contra = TypeVar("I_contra", contravariant=True)
A_co = TypeVar("A_co", covariant=True)


ParseFn = Callable[[I_contra], Result[A_co, Any, Any]]


class ParseObj(Generic[I_contra, A_co]):
    @abstractmethod
    def parse_fn(self, input: I_contra) -> Result[A_co, Any, Any]:
        ...

    def to_fn(self) -> ParseFn[I_contra, A_co]:
        return self.parse_fn


def to_fn(parser: Any) -> ParseFn[Any, Any]:
    if isinstance(parser, ParseObj):
        return parser.to_fn()
    if callable(parser):
        return parser  # type: ignore
    raise TypeError("expected a parser, got {!r}".format(parser))
