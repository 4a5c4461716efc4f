"""
Nock Reduction Engine

Reduces a (subject, formula) pair to a noun. The rules shared by every
revision live here; revision subclasses add or replace opcode handlers.

Key classes:
- Evaluator: Distribution rule, opcode dispatch, opcodes 0-9 and hints
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple, Union

from nock.errors import InvalidOpcode, TypeMismatch
from nock.noun import Atom, Cell, Noun, loobean
from nock.tree import slot

logger = logging.getLogger(__name__)

# A handler either finishes with a noun or hands back the next
# (subject, formula) pair to reduce in tail position.
Step = Union[Noun, Tuple[Noun, Noun]]
Handler = Callable[[Noun, Noun], Step]


class Evaluator:
    """
    Base reduction engine.

    *[a [b c] d]    [*[a b c] *[a d]]
    *[a 0 b]        /[b a]
    *[a 1 b]        b
    *[a 2 b c]      *[*[a b] *[a c]]
    *[a 3 b]        ?*[a b]
    *[a 4 b]        +*[a b]
    *[a 6 b c d]    *[a 2 [0 1] 2 [1 c d] [1 0] 2 [1 2 3] [1 0] 4 4 b]
    *[a 7 b c]      *[a 2 b 1 c]
    *[a 8 b c]      *[a 7 [[7 [0 1] b] 0 1] c]
    *[a 9 b c]      *[a 7 c 2 [0 1] 0 b]

    Opcode 5 and everything above 9 differ between revisions and are
    registered by subclasses through revision_opcodes().
    """

    revision: int = 0

    def __init__(self, trace_hints: bool = False):
        self.trace_hints = trace_hints
        self.opcodes: Dict[int, Handler] = {
            0: self._slot,
            1: self._quote,
            2: self._recurse,
            3: self._is_cell,
            4: self._increment,
            6: self._branch,
            7: self._compose,
            8: self._push,
            9: self._invoke,
        }
        self.opcodes.update(self.revision_opcodes())

    def revision_opcodes(self) -> Dict[int, Handler]:
        """Opcode handlers specific to this revision."""
        raise NotImplementedError

    def evaluate(self, subject: Noun, formula: Noun) -> Noun:
        """
        Reduce formula against subject.

        Tail positions (opcodes 2, 6, 7, 8, 9 and hints) loop here instead of
        recursing, so long-running loops do not grow the Python stack.
        """
        while True:
            if not formula.is_cell():
                raise TypeMismatch("cell", formula)
            op, arg = formula.head, formula.tail
            if op.is_cell():
                return Cell(self.evaluate(subject, op), self.evaluate(subject, arg))
            handler = self.opcodes.get(op.num)
            if handler is None:
                raise InvalidOpcode(op.num, self.revision, formula)
            step = handler(subject, arg)
            if isinstance(step, Noun):
                return step
            subject, formula = step

    def _slot(self, subject: Noun, arg: Noun) -> Step:
        return slot(arg.num, subject)

    def _quote(self, subject: Noun, arg: Noun) -> Step:
        return arg

    def _recurse(self, subject: Noun, arg: Noun) -> Step:
        return self.evaluate(subject, arg.head), self.evaluate(subject, arg.tail)

    def _is_cell(self, subject: Noun, arg: Noun) -> Step:
        return loobean(self.evaluate(subject, arg).is_cell())

    def _increment(self, subject: Noun, arg: Noun) -> Step:
        return Atom(self.evaluate(subject, arg).num + 1)

    def _branch(self, subject: Noun, arg: Noun) -> Step:
        # Any condition other than 0 takes the else branch.
        condition = self.evaluate(subject, arg.head).num
        return subject, slot(6 if condition == 0 else 7, arg)

    def _compose(self, subject: Noun, arg: Noun) -> Step:
        return self.evaluate(subject, arg.head), arg.tail

    def _push(self, subject: Noun, arg: Noun) -> Step:
        return Cell(self.evaluate(subject, arg.head), subject), arg.tail

    def _invoke(self, subject: Noun, arg: Noun) -> Step:
        core = self.evaluate(subject, arg.tail)
        return core, slot(arg.head.num, core)

    def _hint(self, subject: Noun, arg: Noun) -> Step:
        """
        *[a h [b c] d]  *[a d], after computing and discarding *[a c]
        *[a h b c]      *[a c]
        """
        hint = arg.head
        if hint.is_cell():
            clue = self.evaluate(subject, hint.tail)
            if self.trace_hints:
                logger.debug("hint %s clue %s", hint.head, clue)
        elif self.trace_hints:
            logger.debug("hint %s", hint)
        return subject, arg.tail
