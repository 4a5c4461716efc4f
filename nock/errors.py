"""
Nock Error Taxonomy

Every failure is fatal to the evaluation that raised it. Nothing inside the
engine retries or recovers; Interpreter.interpret is the only place that turns
a failure into a result object.

Key classes:
- NockError: Base class for all interpreter failures
- TypeMismatch: Expected an atom and got a cell, or the reverse
- AddressOutOfRange: A tree address walked off the noun
- InvalidOpcode: Formula head names no opcode of the active revision
- ParseError: Bracket notation could not be read
"""

from __future__ import annotations

from typing import Any, Optional


class NockError(Exception):
    """Base class for Nock failures."""

    def __init__(self, message: str, noun: Optional[Any] = None):
        super().__init__(message)
        self.noun = noun


class TypeMismatch(NockError):
    """Raised when an atom is used as a cell or a cell as an atom."""

    def __init__(self, expected: str, noun: Any):
        super().__init__(f"expected {expected}, got {noun}", noun)
        self.expected = expected


class AddressOutOfRange(NockError):
    """Raised when a tree address is not positive or leaves the tree."""

    def __init__(self, address: Any, noun: Optional[Any] = None):
        if noun is None:
            message = f"invalid tree address {address}"
        else:
            message = f"tree address {address} walks off {noun}"
        super().__init__(message, noun)
        self.address = address


class InvalidOpcode(NockError):
    """Raised when a formula names an opcode the revision does not define."""

    def __init__(self, opcode: int, revision: int, noun: Optional[Any] = None):
        super().__init__(f"opcode {opcode} is not defined in Nock {revision}", noun)
        self.opcode = opcode
        self.revision = revision


class ParseError(NockError):
    """Raised by the bracket notation reader on malformed text."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text
