from __future__ import annotations

from .errors import make_bounds_error


class MemoryOpsMixin:
    def _move_right(self):
        state = self.state
        target = state.ptr + 1
        if target >= len(state.memory):
            raise make_bounds_error(
                message='pointer moved right past the end of the tape',
                pc=state.pc,
                ptr=target,
            )
        state.ptr = target

    def _move_left(self):
        state = self.state
        target = state.ptr - 1
        if target < 0:
            raise make_bounds_error(
                message='pointer moved left of the first cell',
                pc=state.pc,
                ptr=target,
            )
        state.ptr = target

    def _current_cell(self) -> int:
        return int(self.state.memory[self.state.ptr])

    def _store_cell(self, value: int) -> None:
        self.state.memory[self.state.ptr] = value & 0xFF
