"""
Nock - an interpreter for the Nock combinator calculus

Nouns, tree addressing, and reduction engines for Nock 4 (current) and
Nock 5.

Exports:
- nock: Evaluate a [subject formula] program with the current revision
- nock4 / nock5: Revision-pinned evaluation
- Interpreter: Non-raising runner returning ExecutionResult
- Atom, Cell, Noun: The noun model
- slot, edit: Tree addressing
- parse: Bracket notation reader
"""

from nock.errors import (
    NockError,
    TypeMismatch,
    AddressOutOfRange,
    InvalidOpcode,
    ParseError,
)
from nock.noun import Noun, Atom, Cell, YES, NO, loobean, noun
from nock.tree import slot, edit
from nock.parser import parse
from nock.runtime import (
    CURRENT_REVISION,
    ExecutionConfig,
    ExecutionResult,
    Interpreter,
    get_evaluator,
    nock,
    nock4,
    nock5,
)

__version__ = "1.0.0"

__all__ = [
    "NockError",
    "TypeMismatch",
    "AddressOutOfRange",
    "InvalidOpcode",
    "ParseError",
    "Noun",
    "Atom",
    "Cell",
    "YES",
    "NO",
    "loobean",
    "noun",
    "slot",
    "edit",
    "parse",
    "CURRENT_REVISION",
    "ExecutionConfig",
    "ExecutionResult",
    "Interpreter",
    "get_evaluator",
    "nock",
    "nock4",
    "nock5",
]
