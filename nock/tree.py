"""
Tree Addressing

Addresses name nodes of a noun: 1 is the root, and for any address n, 2n is
the head of n and 2n + 1 is the tail of n.

- slot: read the subtree at an address (the "/" operator)
- edit: replace the subtree at an address (the "#" operator, Nock 4 only)
"""

from __future__ import annotations

from nock.errors import AddressOutOfRange
from nock.noun import Cell, Noun


def _check_address(address: int) -> None:
    if isinstance(address, bool) or not isinstance(address, int) or address < 1:
        raise AddressOutOfRange(address)


def slot(address: int, noun: Noun) -> Noun:
    """
    Return the subtree of noun at address.

    Walks the bits of the address after the leading 1, most significant
    first: a 0 bit steps into the head, a 1 bit into the tail.
    """
    _check_address(address)
    node = noun
    for bit in bin(address)[3:]:
        if not node.is_cell():
            raise AddressOutOfRange(address, noun)
        node = node.tail if bit == "1" else node.head
    return node


def edit(address: int, original: Noun, value: Noun) -> Noun:
    """
    Return a copy of original with the subtree at address replaced by value.

    #[1 b c]            b
    #[(a + a) b c]      #[a [b /[(a + a + 1) c]] c]
    #[(a + a + 1) b c]  #[a [/[(a + a) c] b] c]
    """
    _check_address(address)
    while address > 1:
        parent = address // 2
        node = slot(parent, original)
        if not node.is_cell():
            raise AddressOutOfRange(address, original)
        if address % 2 == 0:
            value = Cell(value, node.tail)
        else:
            value = Cell(node.head, value)
        address = parent
    return value
