"""
Bracket Notation Reader

Reads the textual form used throughout the Nock documentation: decimal
atoms and bracketed cells, where a bracket holding more than two elements
nests to the right, so ``[a b c]`` reads as ``[a [b c]]``.
"""

from __future__ import annotations

from typing import List, Tuple

from nock.errors import ParseError
from nock.noun import Atom, Cell, Noun


def tokenize(text: str) -> List[str]:
    """Split text into "[", "]" and atom tokens."""
    return text.replace("[", " [ ").replace("]", " ] ").split()


def parse(text: str) -> Noun:
    """Parse a single noun from text."""
    tokens = tokenize(text)
    if not tokens:
        raise ParseError("empty program", text)
    result, pos = _parse_noun(tokens, 0, text)
    if pos != len(tokens):
        raise ParseError(f"unexpected token {tokens[pos]!r} after noun", text)
    return result


def _parse_noun(tokens: List[str], pos: int, text: str) -> Tuple[Noun, int]:
    if pos >= len(tokens):
        raise ParseError("unexpected end of input", text)
    token = tokens[pos]
    if token == "[":
        return _parse_cell(tokens, pos + 1, text)
    if token == "]":
        raise ParseError("unbalanced ']'", text)
    if not (token.isascii() and token.isdigit()):
        raise ParseError(f"invalid atom {token!r}", text)
    return Atom(int(token)), pos + 1


def _parse_cell(tokens: List[str], pos: int, text: str) -> Tuple[Noun, int]:
    elements: List[Noun] = []
    while True:
        if pos >= len(tokens):
            raise ParseError("missing ']'", text)
        if tokens[pos] == "]":
            break
        element, pos = _parse_noun(tokens, pos, text)
        elements.append(element)
    if len(elements) < 2:
        raise ParseError(f"a cell needs at least two elements, got {len(elements)}", text)
    result = elements[-1]
    for element in reversed(elements[:-1]):
        result = Cell(element, result)
    return result, pos + 1
