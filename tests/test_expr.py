from typing import Any, Callable, List, Tuple

import pytest

from partsec import (
    Delay, Fatal, FatalError, NoMatch, Position, Positioned, Pure, parse
)
from partsec.sequence import digit, sample, satisfy


class Unclosed:
    def __init__(self, input: Any) -> None:
        self.pos = input.pos

    def __str__(self) -> str:
        return "expected ')'"


def op_action(op: str) -> Callable[[int, int], int]:
    return {
        "+": lambda a, b: a + b,
        "-": lambda a, b: a - b,
        "*": lambda a, b: a * b,
    }[op]


def chain(term: Any, op: Any) -> Any:
    def fold(v: Tuple[int, List[Tuple[Any, int]]]) -> int:
        acc, rest = v
        for fn, x in rest:
            acc = fn(acc, x)
        return acc

    return (term + (op + term).many()).fmap(fold)


spaces = satisfy(str.isspace).many()
number = (digit + digit.many()).fmap(
    lambda v: int(v[0] + "".join(v[1]))
) << spaces
mul_op = satisfy(lambda c: c == "*").fmap(op_action) << spaces
add_op = satisfy(lambda c: c in "+-").fmap(op_action) << spaces
l_paren = sample("(") << spaces
r_paren = (sample(")") << spaces).commit(lambda e, i: Unclosed(i))

expr = Delay[Any, int]()
atom = number | (l_paren >> expr << r_paren)
expr.define(chain(chain(atom, mul_op), add_op))

parser = spaces >> expr


def eval(src: str) -> int:
    return parse(parser, src, complete=True).unwrap()


DATA_POSITIVE: List[Tuple[str, int]] = [
    ("1", 1),
    ("12", 12),
    ("1 + 2", 3),
    ("2 - 1", 1),
    ("2 * 3", 6),
    ("1 + 2 * 3", 7),
    ("(1 + 2) * 3", 9),
    ("((1) + (2))", 3),
    (" 1\n+\n2 ", 3),
]


@pytest.mark.parametrize("data, expected", DATA_POSITIVE)
def test_positive(data: str, expected: int) -> None:
    assert eval(data) == expected


DATA_NO_MATCH = [
    ("", "at 1:1: no applicable alternative matched "
         "(expected digit or unexpected end of input)"),
    ("1 1", "at 1:3: no applicable alternative matched "
            "(expected end of input)"),
    ("1 )", "at 1:3: no applicable alternative matched "
            "(expected end of input)"),
]


@pytest.mark.parametrize("data, expected", DATA_NO_MATCH)
def test_no_match(data: str, expected: str) -> None:
    with pytest.raises(NoMatch) as err:
        eval(data)
    assert str(err.value) == expected


DATA_FATAL = [
    ("(1", "at 1:3: expected ')'"),
    ("(1 + 2", "at 1:7: expected ')'"),
    ("1 +\n(2 * (3)", "at 2:9: expected ')'"),
]


@pytest.mark.parametrize("data, expected", DATA_FATAL)
def test_fatal(data: str, expected: str) -> None:
    with pytest.raises(FatalError) as err:
        eval(data)
    assert str(err.value) == expected


def test_fatal_is_not_masked_by_alternative() -> None:
    r = (parser | Pure(0))(Positioned("(1"))
    assert type(r) is Fatal
    assert r.error.pos == Position(1, 3)
