"""
Nock Interpreter

Entry points for running a program pair [subject formula].

Key functions and classes:
- nock: Evaluate a program with the current (or a chosen) revision, raising on failure
- nock4 / nock5: Revision-pinned shortcuts
- ExecutionConfig: Configuration for an Interpreter
- ExecutionResult: Outcome of one program run
- Interpreter: Runs programs and reports failures as results instead of raising
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

from nock.errors import NockError
from nock.noun import Noun, noun
from nock.parser import parse
from nock.runtime.evaluator import Evaluator
from nock.runtime.revisions import get_evaluator

logger = logging.getLogger(__name__)

Program = Union[Noun, str, int, Sequence[Any]]


def to_noun(program: Program) -> Noun:
    """Accept a noun, bracket notation text, or nested Python ints and tuples."""
    if isinstance(program, str):
        return parse(program)
    return noun(program)


def run(evaluator: Evaluator, program: Program) -> Noun:
    """
    Evaluate a program pair with the given evaluator.

    A program that is an atom, or whose tail is an atom, has no formula to
    run and is returned unchanged.
    """
    pair = to_noun(program)
    if pair.is_atom() or pair.tail.is_atom():
        return pair
    return evaluator.evaluate(pair.head, pair.tail)


def nock(program: Program, revision: Optional[int] = None) -> Noun:
    """Evaluate a program, using the current revision unless one is given."""
    return run(get_evaluator(revision), program)


def nock4(program: Program) -> Noun:
    """Evaluate a program under Nock 4."""
    return nock(program, revision=4)


def nock5(program: Program) -> Noun:
    """Evaluate a program under Nock 5."""
    return nock(program, revision=5)


@dataclass
class ExecutionConfig:
    """Configuration for program execution."""
    revision: Optional[int] = None
    trace_hints: bool = False
    render_result: bool = True


@dataclass
class ExecutionResult:
    """Result of running one program."""
    success: bool
    revision: int
    value: Optional[Noun] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    execution_time_ms: float = 0.0
    render_result: bool = True

    def to_dict(self) -> Dict[str, Any]:
        if self.value is None:
            value = None
        elif self.render_result:
            value = str(self.value)
        else:
            value = self.value
        return {
            "success": self.success,
            "revision": self.revision,
            "value": value,
            "error": self.error,
            "error_type": self.error_type,
            "execution_time_ms": self.execution_time_ms,
        }


class Interpreter:
    """
    Runs Nock programs under one configured revision.

    Evaluation itself never recovers from a failure; interpret() only records
    the failure in the returned ExecutionResult so callers can inspect it.
    """

    def __init__(self, config: ExecutionConfig = None):
        self.config = config or ExecutionConfig()
        self.evaluator = get_evaluator(self.config.revision, trace_hints=self.config.trace_hints)

    @property
    def revision(self) -> int:
        return self.evaluator.revision

    def evaluate(self, program: Program) -> Noun:
        """Evaluate a program, raising NockError on failure."""
        return run(self.evaluator, program)

    def interpret(self, program: Program) -> ExecutionResult:
        """
        Evaluate a program and wrap the outcome.

        Args:
            program: Noun, bracket notation text, or nested ints and tuples

        Returns:
            ExecutionResult with the value or the failure
        """
        start = time.time()
        result = ExecutionResult(
            success=False,
            revision=self.revision,
            render_result=self.config.render_result,
        )
        logger.debug(f"Running program under Nock {self.revision}")

        try:
            result.value = self.evaluate(program)
            result.success = True
        except NockError as e:
            result.error = str(e)
            result.error_type = type(e).__name__
        except RecursionError:
            result.error = "recursion limit exceeded during evaluation"
            result.error_type = "RecursionError"

        result.execution_time_ms = (time.time() - start) * 1000
        if result.success:
            logger.debug(f"Program finished in {result.execution_time_ms:.2f}ms")
        else:
            logger.debug(f"Program failed: {result.error_type}: {result.error}")
        return result
