from typing import Any

from .input import take_one_part
from .matcher import MatcherLike, as_matcher
from .result import EndOfInput, Err, Ok, Rejected, Result

_END = Err(EndOfInput())


def one_part(input: Any) -> Result[Any, Any, Any]:
    taken = take_one_part(input)
    if taken is None:
        return _END
    return Ok(taken[0], taken[1])


def one_matching_part(
        input: Any, matcher: MatcherLike[Any]) -> Result[Any, Any, Any]:
    check = as_matcher(matcher).check
    taken = take_one_part(input)
    if taken is None:
        return _END
    part, rest = taken
    if check(part):
        return Ok(part, rest)
    return Err(Rejected(part))


def end_of_input(input: Any) -> Result[None, Any, Any]:
    taken = take_one_part(input)
    if taken is None:
        return Ok(None, input)
    return Err(Rejected(taken[0]))
