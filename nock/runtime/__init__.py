"""
Nock Runtime Engine

This module provides the reduction engines and entry points:
- Evaluator: Shared reduction rules
- Nock4Evaluator / Nock5Evaluator: The two supported revisions
- Interpreter: Runs programs and reports results
- nock: Evaluate with the current revision
"""

from nock.runtime.evaluator import Evaluator
from nock.runtime.revisions import (
    CURRENT_REVISION,
    REVISIONS,
    Nock4Evaluator,
    Nock5Evaluator,
    get_evaluator,
)
from nock.runtime.interpreter import (
    ExecutionConfig,
    ExecutionResult,
    Interpreter,
    nock,
    nock4,
    nock5,
    run,
    to_noun,
)

__all__ = [
    "Evaluator",
    "CURRENT_REVISION",
    "REVISIONS",
    "Nock4Evaluator",
    "Nock5Evaluator",
    "get_evaluator",
    "ExecutionConfig",
    "ExecutionResult",
    "Interpreter",
    "nock",
    "nock4",
    "nock5",
    "run",
    "to_noun",
]
