from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

MEMORY_SIZE = 30000


def _new_tape() -> np.ndarray:
    return np.zeros(MEMORY_SIZE, dtype=np.uint8)


@dataclass
class MachineState:
    memory: np.ndarray = field(default_factory=_new_tape)
    pc: int = 0
    ptr: int = 0
    step_count: int = 0

    def rewind(self) -> None:
        # Registers only; the tape keeps whatever the last run left in it.
        self.pc = 0
        self.ptr = 0
        self.step_count = 0

    def reset(self) -> None:
        self.memory[:] = 0
        self.rewind()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MachineState):
            return NotImplemented
        return (
            self.pc == other.pc
            and self.ptr == other.ptr
            and np.array_equal(self.memory, other.memory)
        )
