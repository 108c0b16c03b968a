from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .errors import make_jump_error
from .lexer import Instruction, locate, render


def build_jump_table(instructions: Sequence[Instruction], *, source: Optional[str] = None,
                     debug: bool = False) -> Dict[int, int]:
    """
    Match loop brackets and return the symmetric jump table.

    Brackets nest like parentheses: each ']' pairs with the most recently
    opened '[' that is still unmatched. Both directions are recorded, so
    table[table[i]] == i for every key. When source is given, errors point
    at the offending source line instead of the instruction listing.
    """
    table: Dict[int, int] = {}
    stack: List[int] = []

    for i, ins in enumerate(instructions):
        if ins is Instruction.JUMP_IF_ZERO:
            stack.append(i)
        elif ins is Instruction.JUMP_IF_NONZERO:
            if not stack:
                raise _jump_error("Unmatched ']'", i, instructions, source, debug)
            start = stack.pop()
            table[start] = i
            table[i] = start

    if stack:
        raise _jump_error("Unmatched '['", stack[-1], instructions, source, debug)

    return table


def _jump_error(message, index, instructions, source, debug):
    line = 0
    if source is not None:
        line, _ = locate(source, index, debug)
    return make_jump_error(message=message, index=index, code=render(instructions),
                           source=source, line=line)


class ControlFlowMixin:
    # The target is the partner bracket itself; the step's pc += 1 moves past it.

    def _jump_if_zero(self):
        if self._current_cell() == 0:
            self.state.pc = self.jump_table[self.state.pc]

    def _jump_if_nonzero(self):
        if self._current_cell() != 0:
            self.state.pc = self.jump_table[self.state.pc]
