"""
Public API.
"""

from . import output, primitive, sequence
from .core.input import Input, Positioned, Span, parts, take_one_part
from .core.matcher import Equals, Matcher, Predicate, as_matcher
from .core.primitive import end_of_input, one_matching_part, one_part
from .core.repeat import collect_repeating
from .core.result import (
    Both, EndOfInput, Err, Expected, Fatal, Mismatch, Ok, Rejected, Result
)
from .core.types import Position
from .output import FatalError, NoMatch, ParseError, ParseResult, parse
from .parser import (
    Delay, FnParser, Parser, alt, between, bind, commit, fmap, fn_parser,
    label, many, maybe, sep_by, seq, seql, seqr
)
from .primitive import Pure, PureFn, fail, fatal
from .sequence import any_part, eof, matching_part, sample, satisfy

__all__ = (
    "output", "primitive", "sequence",
    "Input", "Positioned", "Span", "parts", "take_one_part",
    "Equals", "Matcher", "Predicate", "as_matcher",
    "end_of_input", "one_matching_part", "one_part",
    "collect_repeating",
    "Both", "EndOfInput", "Err", "Expected", "Fatal", "Mismatch", "Ok",
    "Rejected", "Result",
    "Position",
    "FatalError", "NoMatch", "ParseError", "ParseResult", "parse",

    "Delay", "FnParser", "Parser", "alt", "between", "bind", "commit", "fmap",
    "fn_parser", "label", "many", "maybe", "sep_by", "seq", "seql", "seqr",
    "Pure", "PureFn", "fail", "fatal",
    "any_part", "eof", "matching_part", "sample", "satisfy",
)

__version__ = "0.1.0"
