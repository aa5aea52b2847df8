from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from typing_extensions import Literal, final

V = TypeVar("V")
V_co = TypeVar("V_co", covariant=True)
I = TypeVar("I")
F = TypeVar("F")
U = TypeVar("U")
J = TypeVar("J")


@dataclass(frozen=True)
class EndOfInput:
    pass


@dataclass(frozen=True)
class Rejected:
    part: Any


@dataclass(frozen=True)
class Expected:
    label: str


@dataclass(frozen=True)
class Both:
    first: Any
    second: Any


Mismatch = Union[EndOfInput, Rejected, Expected, Both]


@final
class Ok(Generic[V_co, I]):
    __slots__ = "value", "rest"

    is_ok: Literal[True] = True
    is_err: Literal[False] = False
    is_fatal: Literal[False] = False

    def __init__(self, value: V_co, rest: I):
        self.value = value
        self.rest = rest

    def __repr__(self) -> str:
        return "Ok({!r}, {!r})".format(self.value, self.rest)

    def __eq__(self, other: object) -> bool:
        if type(other) is Ok:
            return self.value == other.value and self.rest == other.rest
        return NotImplemented

    def and_then(
            self,
            fn: Callable[[V_co, I], "Result[U, J, F]"]) -> "Result[U, J, F]":
        return fn(self.value, self.rest)

    def or_else(self, fn: object) -> "Ok[V_co, I]":
        return self

    def fmap(self, fn: Callable[[V_co], U]) -> "Ok[U, I]":
        return Ok(fn(self.value), self.rest)

    def map_err(self, fn: object) -> "Ok[V_co, I]":
        return self

    def map_fatal(self, fn: object) -> "Ok[V_co, I]":
        return self


@final
class Err:
    __slots__ = "error",

    is_ok: Literal[False] = False
    is_err: Literal[True] = True
    is_fatal: Literal[False] = False

    def __init__(self, error: Optional[Any] = None):
        self.error = error

    def __repr__(self) -> str:
        if self.error is None:
            return "Err()"
        return "Err({!r})".format(self.error)

    def __eq__(self, other: object) -> bool:
        if type(other) is Err:
            return self.error == other.error
        return NotImplemented

    def and_then(self, fn: object) -> "Err":
        return self

    def or_else(self, fn: Callable[[], "Result[V, I, F]"]) -> "Result[V, I, F]":
        return fn()

    def fmap(self, fn: object) -> "Err":
        return self

    def map_err(self, fn: Callable[[Any], Any]) -> "Err":
        return Err(fn(self.error))

    def map_fatal(self, fn: object) -> "Err":
        return self


@final
class Fatal(Generic[F]):
    """
    Unrecoverable failure. ``input`` is the input the failure was raised on,
    if known; it is used to locate the error and does not take part in
    comparison.
    """

    __slots__ = "error", "input"

    is_ok: Literal[False] = False
    is_err: Literal[False] = False
    is_fatal: Literal[True] = True

    def __init__(self, error: F, input: Any = None):
        self.error = error
        self.input = input

    def __repr__(self) -> str:
        return "Fatal({!r})".format(self.error)

    def __eq__(self, other: object) -> bool:
        if type(other) is Fatal:
            return self.error == other.error
        return NotImplemented

    def and_then(self, fn: object) -> "Fatal[F]":
        return self

    def or_else(self, fn: object) -> "Fatal[F]":
        return self

    def fmap(self, fn: object) -> "Fatal[F]":
        return self

    def map_err(self, fn: object) -> "Fatal[F]":
        return self

    def map_fatal(self, fn: Callable[[F], U]) -> "Fatal[U]":
        return Fatal(fn(self.error), self.input)


Result = Union[Ok[V, I], Err, Fatal[F]]
