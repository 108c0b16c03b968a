from __future__ import annotations

import io
import sys
from typing import List, Optional, Sequence

import numpy as np

from .jit import EVENT_END, encode_jump_table, encode_program, run_until_event
from .lexer import Instruction, tokenize
from .ops_arith import ArithOpsMixin
from .ops_control import ControlFlowMixin, build_jump_table
from .ops_io import IOMixin
from .ops_memory import MemoryOpsMixin
from .state import MachineState


class Program(MemoryOpsMixin, ArithOpsMixin, IOMixin, ControlFlowMixin):
    """
    A compiled Brainfuck program and the machine it runs on.

    Construction:
    - The instruction list is kept as given (source order, comments removed)
    - The jump table is built once; unmatched brackets raise UnbalancedJumpError
    - A 30,000 cell tape of unsigned bytes is allocated, all zero

    Execution:
    - pc and ptr restart at 0 on every run()
    - The tape is NOT cleared between runs; call reset() for a fresh tape
    - Faults are raised to the caller; output already written stands
    """

    def __init__(self, instructions: Sequence[Instruction], debug_stream=None, *,
                 source: Optional[str] = None, debug: bool = False):
        self.instructions: List[Instruction] = list(instructions)
        self.jump_table = build_jump_table(self.instructions, source=source, debug=debug)
        self.state = MachineState()
        self.debug_stream = debug_stream

        # Arrays for Numba
        self._program_arr = encode_program(self.instructions)
        self._jump_arr = encode_jump_table(self.jump_table, len(self.instructions))

    compile = staticmethod(tokenize)

    @classmethod
    def from_str(cls, source: str, debug: bool = False, debug_stream=None) -> "Program":
        return cls(tokenize(source, debug), debug_stream, source=source, debug=debug)

    @property
    def memory(self) -> np.ndarray:
        return self.state.memory

    def reset(self) -> None:
        self.state.reset()

    def __len__(self) -> int:
        return len(self.instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return (
            self.instructions == other.instructions
            and self.jump_table == other.jump_table
            and np.array_equal(self.state.memory, other.state.memory)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Program(instructions={len(self.instructions)}, pc={self.state.pc}, ptr={self.state.ptr})"

    # ===== Execution =====

    def run(self, input_stream=None, output_stream=None, *, jit: bool = True) -> None:
        """
        Run from the first instruction until pc reaches the end.

        input_stream is a binary reader (or bytes); EOF leaves the current cell
        unchanged. output_stream is a binary writer. Both default to the
        process's stdin/stdout buffers.
        """
        input_stream = _as_reader(input_stream)
        if output_stream is None:
            output_stream = sys.stdout.buffer

        self.state.rewind()
        if jit:
            self._run_jit(input_stream, output_stream)
        else:
            while self.step(input_stream, output_stream):
                pass

    def _run_jit(self, input_stream, output_stream):
        state = self.state
        while True:
            pc, ptr, event, steps = run_until_event(
                self._program_arr, state.memory, state.pc, state.ptr, self._jump_arr
            )
            state.pc = int(pc)
            state.ptr = int(ptr)
            state.step_count += int(steps)

            if event == EVENT_END:
                return
            # The kernel stopped in front of something only Python can do.
            if not self.step(input_stream, output_stream):
                return

    def step(self, input_stream, output_stream) -> bool:
        """Execute the instruction at pc; return whether any instructions remain."""
        state = self.state
        if state.pc >= len(self.instructions):
            return False

        command = self.instructions[state.pc]

        if command is Instruction.MOVE_RIGHT:
            self._move_right()
        elif command is Instruction.MOVE_LEFT:
            self._move_left()
        elif command is Instruction.INCREMENT:
            self._increment()
        elif command is Instruction.DECREMENT:
            self._decrement()
        elif command is Instruction.OUTPUT:
            self._output(output_stream)
        elif command is Instruction.INPUT:
            self._input(input_stream)
        elif command is Instruction.JUMP_IF_ZERO:
            self._jump_if_zero()
        elif command is Instruction.JUMP_IF_NONZERO:
            self._jump_if_nonzero()
        elif command is Instruction.DEBUG_PRINT:
            self._debug_print()

        state.pc += 1
        state.step_count += 1
        return state.pc < len(self.instructions)


def _as_reader(input_stream):
    if input_stream is None:
        return sys.stdin.buffer
    if isinstance(input_stream, (bytes, bytearray)):
        return io.BytesIO(bytes(input_stream))
    return input_stream
