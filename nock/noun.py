"""
Nock Noun Model

A noun is an atom (a natural number) or a cell (an ordered pair of nouns).
Nouns are immutable; anything that looks like an edit builds a new noun and
shares the untouched branches with the old one.

Key classes:
- Noun: Common base for atoms and cells
- Atom: A natural number
- Cell: An ordered pair of nouns
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from nock.errors import TypeMismatch


class Noun:
    """Base class of Atom and Cell."""

    __slots__ = ()

    def is_atom(self) -> bool:
        return isinstance(self, Atom)

    def is_cell(self) -> bool:
        return isinstance(self, Cell)


@dataclass(frozen=True, repr=False)
class Atom(Noun):
    """A natural number."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"atom value must be an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"atom value must be a natural number, got {self.value}")

    @property
    def num(self) -> int:
        return self.value

    @property
    def head(self) -> Noun:
        raise TypeMismatch("cell", self)

    @property
    def tail(self) -> Noun:
        raise TypeMismatch("cell", self)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Atom({self.value})"


@dataclass(frozen=True, repr=False)
class Cell(Noun):
    """An ordered pair of nouns."""
    head: Noun
    tail: Noun

    def __post_init__(self):
        for part in (self.head, self.tail):
            if not isinstance(part, Noun):
                raise TypeError(f"cell parts must be nouns, got {type(part).__name__}")

    @property
    def num(self) -> int:
        raise TypeMismatch("atom", self)

    def __str__(self) -> str:
        return f"[{self.head} {self.tail}]"

    def __repr__(self) -> str:
        return f"Cell({self.head!r}, {self.tail!r})"


YES = Atom(0)
NO = Atom(1)


def loobean(flag: bool) -> Atom:
    """Return atom 0 for true and atom 1 for false."""
    return YES if flag else NO


def noun(value: Union[Noun, int, Sequence[Any]]) -> Noun:
    """
    Build a noun from plain Python values.

    Ints become atoms. A tuple or list of two or more items becomes a
    right-nested chain of cells, so ``(1, 2, 3)`` is ``[1 [2 3]]``.
    Nested sequences are converted recursively.
    """
    if isinstance(value, Noun):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Atom(value)
    if isinstance(value, (tuple, list)):
        if len(value) < 2:
            raise ValueError(f"a cell needs at least two elements, got {len(value)}")
        result = noun(value[-1])
        for item in reversed(value[:-1]):
            result = Cell(noun(item), result)
        return result
    raise TypeError(f"cannot build a noun from {type(value).__name__}")
