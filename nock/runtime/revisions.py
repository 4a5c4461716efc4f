"""
Nock Revisions

Nock versions count down toward a frozen final release, so the lowest
version number is the newest. Both engines share Evaluator and differ in
opcode 5 and the opcodes above 9.

Key classes:
- Nock5Evaluator: The older rules, opcode 10 is a hint
- Nock4Evaluator: The newer rules, opcode 10 edits and opcode 11 is a hint
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from nock.errors import TypeMismatch
from nock.noun import Noun, loobean
from nock.runtime.evaluator import Evaluator, Handler, Step
from nock.tree import edit


class Nock5Evaluator(Evaluator):
    """
    Nock 5.

    *[a 5 b]        =*[a b]
    *[a 10 [b c] d] *[a 8 c 7 [0 3] d]
    *[a 10 b c]     *[a c]
    """

    revision = 5

    def revision_opcodes(self) -> Dict[int, Handler]:
        return {5: self._equals, 10: self._hint}

    def _equals(self, subject: Noun, arg: Noun) -> Step:
        # Compares rendered text; the same as structural equality for any
        # finite noun.
        pair = self.evaluate(subject, arg)
        return loobean(str(pair.head) == str(pair.tail))


class Nock4Evaluator(Evaluator):
    """
    Nock 4.

    *[a 5 b c]          =[*[a b] *[a c]]
    *[a 10 [b c] d]     #[b *[a c] *[a d]]
    *[a 11 [b c] d]     *[[*[a c] *[a d]] 0 3]
    *[a 11 b c]         *[a c]
    """

    revision = 4

    def revision_opcodes(self) -> Dict[int, Handler]:
        return {5: self._equals, 10: self._edit, 11: self._hint}

    def _equals(self, subject: Noun, arg: Noun) -> Step:
        return loobean(self.evaluate(subject, arg.head) == self.evaluate(subject, arg.tail))

    def _edit(self, subject: Noun, arg: Noun) -> Step:
        target = arg.head
        if not target.is_cell():
            raise TypeMismatch("cell", target)
        address = target.head.num
        value = self.evaluate(subject, target.tail)
        return edit(address, self.evaluate(subject, arg.tail), value)


REVISIONS: Dict[int, Type[Evaluator]] = {
    Nock4Evaluator.revision: Nock4Evaluator,
    Nock5Evaluator.revision: Nock5Evaluator,
}

CURRENT_REVISION = min(REVISIONS)


def get_evaluator(revision: Optional[int] = None, trace_hints: bool = False) -> Evaluator:
    """Build the evaluator for a revision, defaulting to the current one."""
    if revision is None:
        revision = CURRENT_REVISION
    try:
        evaluator_class = REVISIONS[revision]
    except KeyError:
        raise ValueError(
            f"unknown Nock revision {revision}, expected one of {sorted(REVISIONS)}"
        ) from None
    return evaluator_class(trace_hints=trace_hints)
