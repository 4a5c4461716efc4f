"""Test fixtures for the Nock interpreter test suite."""
import pytest
import sys
from pathlib import Path
from typing import Dict

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nock.runtime.revisions import Nock4Evaluator, Nock5Evaluator


DECREMENT = "[8 [1 0] 8 [1 6 [5 [0 7] 4 0 6] [0 6] 9 2 [0 2] [4 0 6] 0 7] 9 2 0 1]"

# Programs whose results are the same under every revision.
COMMON_PROGRAMS: Dict[str, str] = {
    "[0 1 2]": "2",
    "[57 [0 1]]": "57",
    "[42 [4 0 1]]": "43",
    "[57 [4 0 1]]": "58",
    "[[132 19] [0 3]]": "19",
    "[42 [1 153 218]]": "[153 218]",
    "[[132 19] [4 0 3]]": "20",
    "[42 [8 [4 0 1] [0 1]]]": "[43 42]",
    "[42 [[4 0 1] [3 0 1]]]": "[43 1]",
    "[42 [8 [4 0 1] [4 0 3]]]": "43",
    "[42 [7 [4 0 1] [4 0 1]]]": "44",
    "[[[4 5] [6 14 15]] [0 7]]": "[14 15]",
    "[77 [2 [1 42] [1 1 153 218]]]": "[153 218]",
    "[42 [6 [1 0] [4 0 1] [1 233]]]": "43",
    "[42 [6 [1 1] [4 0 1] [1 233]]]": "233",
    "[[7 7] [5 [0 2] [0 3]]]": "0",
    "[[7 8] [5 [0 2] [0 3]]]": "1",
    "[[[1 2] [1 2]] [5 [0 2] [0 3]]]": "0",
    f"[42 {DECREMENT}]": "41",
}


@pytest.fixture
def nock4_evaluator() -> Nock4Evaluator:
    """Nock 4 evaluator."""
    return Nock4Evaluator()


@pytest.fixture
def nock5_evaluator() -> Nock5Evaluator:
    """Nock 5 evaluator."""
    return Nock5Evaluator()


@pytest.fixture(params=[4, 5], ids=["nock4", "nock5"])
def evaluator(request):
    """Each supported revision in turn."""
    if request.param == 4:
        return Nock4Evaluator()
    return Nock5Evaluator()


@pytest.fixture
def sample_tree():
    """[[4 5] [6 14 15]], the tree used in the slot examples."""
    from nock.parser import parse
    return parse("[[4 5] [6 14 15]]")
