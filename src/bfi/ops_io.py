from __future__ import annotations

import sys
from typing import List

from .errors import make_io_error

# Cells/instructions shown on each side of the current one in a debug snapshot.
DEBUG_WINDOW = 3


def _window(seq, center: int, size: int = DEBUG_WINDOW):
    # Clamped to the sequence, so snapshots near either edge never fail.
    before = seq[max(0, center - size):center]
    after = seq[center + 1:min(len(seq), center + 1 + size)]
    return before, after


def _names(instructions) -> List[str]:
    return [ins.name for ins in instructions]


class IOMixin:
    def _output(self, output_stream):
        value = self._current_cell()
        try:
            output_stream.write(bytes((value,)))
        except OSError as exc:
            raise make_io_error(message='write to output failed', pc=self.state.pc, cause=exc) from exc

    def _input(self, input_stream):
        try:
            data = input_stream.read(1)
        except OSError as exc:
            raise make_io_error(message='read from input failed', pc=self.state.pc, cause=exc) from exc

        if not data:
            # EOF: the cell keeps its current value.
            return
        if isinstance(data, str):
            self._store_cell(ord(data))
        else:
            self._store_cell(data[0])

    def snapshot(self, pc=None, ptr=None) -> str:
        """
        Render the debug view of the machine.

        Shows pc and ptr, the instruction at pc with up to three instructions
        on each side, and the cell at ptr with up to three cells on each side.
        """
        pc = self.state.pc if pc is None else pc
        ptr = self.state.ptr if ptr is None else ptr

        pre_com, post_com = _window(self.instructions, pc)
        current = self.instructions[pc].name if pc < len(self.instructions) else 'END'

        memory = self.state.memory
        pre_mem, post_mem = _window(memory, ptr)

        lines = [
            '-' * 26,
            f"PC: {pc} | PTR: {ptr}",
            f"COMS: {_names(pre_com)} -> {current} <- {_names(post_com)}",
            f"MEM: {[int(v) for v in pre_mem]} -> {int(memory[ptr])} <- {[int(v) for v in post_mem]}",
            '-' * 26,
        ]
        return "\n".join(lines)

    def _debug_print(self):
        stream = self.debug_stream if self.debug_stream is not None else sys.stderr
        print(self.snapshot(), file=stream)
