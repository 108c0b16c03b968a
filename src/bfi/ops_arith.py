from __future__ import annotations


class ArithOpsMixin:
    # Cells are unsigned bytes; both directions wrap modulo 256.

    def _increment(self):
        self._store_cell(self._current_cell() + 1)

    def _decrement(self):
        self._store_cell(self._current_cell() - 1)
