"""Test slot addressing and tree editing."""
import pytest
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nock.errors import AddressOutOfRange
from nock.noun import Atom, Cell
from nock.parser import parse
from nock.tree import edit, slot


VALID_ADDRESSES = {
    1: "[[4 5] [6 [14 15]]]",
    2: "[4 5]",
    3: "[6 [14 15]]",
    4: "4",
    5: "5",
    6: "6",
    7: "[14 15]",
    14: "14",
    15: "15",
}


class TestSlot:
    """Tests for slot()."""

    @pytest.mark.parametrize("address,expected", sorted(VALID_ADDRESSES.items()))
    def test_slot_examples(self, sample_tree, address, expected):
        """Test every address of [[4 5] [6 14 15]]."""
        assert str(slot(address, sample_tree)) == expected

    def test_root_head_tail(self):
        """Test addresses 1, 2 and 3 of a cell."""
        cell = Cell(Atom(8), Atom(9))
        assert slot(1, cell) is cell
        assert slot(2, cell) == Atom(8)
        assert slot(3, cell) == Atom(9)

    def test_slot_one_of_atom(self):
        """Test address 1 of an atom is the atom."""
        assert slot(1, Atom(3)) == Atom(3)

    @pytest.mark.parametrize("address", [0, -1, -6])
    def test_non_positive_address(self, sample_tree, address):
        """Test address 0 and negative addresses fail."""
        with pytest.raises(AddressOutOfRange) as info:
            slot(address, sample_tree)
        assert info.value.address == address

    @pytest.mark.parametrize("address", [8, 12, 13, 28])
    def test_walk_off_tree(self, sample_tree, address):
        """Test addresses below an atom fail."""
        with pytest.raises(AddressOutOfRange):
            slot(address, sample_tree)

    def test_head_of_atom(self):
        """Test address 2 of an atom fails."""
        with pytest.raises(AddressOutOfRange):
            slot(2, Atom(42))


class TestEdit:
    """Tests for edit()."""

    def test_edit_example(self):
        """Test replacing address 6 of [20 [60 70]]."""
        original = parse("[20 60 70]")
        assert str(edit(6, original, Atom(42))) == "[20 [42 70]]"

    def test_edit_root(self, sample_tree):
        """Test address 1 replaces the whole noun."""
        assert edit(1, sample_tree, Atom(0)) == Atom(0)

    def test_edit_head_and_tail(self):
        """Test addresses 2 and 3 keep the sibling."""
        cell = Cell(Atom(1), Atom(2))
        assert edit(2, cell, Atom(9)) == Cell(Atom(9), Atom(2))
        assert edit(3, cell, Atom(9)) == Cell(Atom(1), Atom(9))

    def test_edit_deep(self, sample_tree):
        """Test replacing a leaf several levels down."""
        result = edit(14, sample_tree, Cell(Atom(0), Atom(0)))
        assert str(result) == "[[4 5] [6 [[0 0] 15]]]"

    @pytest.mark.parametrize("address", sorted(VALID_ADDRESSES))
    def test_edit_then_slot(self, sample_tree, address):
        """Test reading back an edited address gives the replacement."""
        replacement = parse("[99 100]")
        assert slot(address, edit(address, sample_tree, replacement)) == replacement

    def test_edit_shares_untouched_branches(self, sample_tree):
        """Test the sibling branch is reused, not copied."""
        result = edit(4, sample_tree, Atom(0))
        assert result.tail is sample_tree.tail
        assert sample_tree == parse("[[4 5] [6 14 15]]")

    @pytest.mark.parametrize("address", [0, 12, 29])
    def test_edit_out_of_range(self, sample_tree, address):
        """Test editing below an atom fails."""
        with pytest.raises(AddressOutOfRange):
            edit(address, sample_tree, Atom(1))

    def test_edit_atom(self):
        """Test editing inside an atom fails."""
        with pytest.raises(AddressOutOfRange):
            edit(2, Atom(3), Atom(1))
