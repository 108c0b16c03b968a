from __future__ import annotations

from typing import Dict, Sequence

import numpy as np
from numba import njit

from .lexer import OPCODES, Instruction

OP_RIGHT = OPCODES[Instruction.MOVE_RIGHT]
OP_LEFT = OPCODES[Instruction.MOVE_LEFT]
OP_INC = OPCODES[Instruction.INCREMENT]
OP_DEC = OPCODES[Instruction.DECREMENT]
OP_JZ = OPCODES[Instruction.JUMP_IF_ZERO]
OP_JNZ = OPCODES[Instruction.JUMP_IF_NONZERO]

# Why the kernel returned control.
EVENT_END = 0
EVENT_HANDOFF = 1


def encode_program(instructions: Sequence[Instruction]) -> np.ndarray:
    return np.array([ins.opcode for ins in instructions], dtype=np.int32)


def encode_jump_table(table: Dict[int, int], length: int) -> np.ndarray:
    # Non-bracket slots map to themselves; the kernel never reads them.
    arr = np.arange(length, dtype=np.int32)
    for k, v in table.items():
        arr[k] = v
    return arr


@njit(cache=True)
def run_until_event(program_arr, memory, pc, pointer, jump_arr):
    """
    Execute pointer, arithmetic and jump instructions natively.

    Returns (pc, pointer, event, steps). On EVENT_HANDOFF, pc is the index of
    an instruction that has not run yet and must be executed by the Python
    step: I/O, a debug print, or a move that would leave the tape.
    """
    mem_len = len(memory)
    prog_len = len(program_arr)
    steps = 0

    while pc < prog_len:
        command = program_arr[pc]

        if command == OP_RIGHT:
            if pointer + 1 >= mem_len:
                return pc, pointer, EVENT_HANDOFF, steps
            pointer += 1
        elif command == OP_LEFT:
            if pointer == 0:
                return pc, pointer, EVENT_HANDOFF, steps
            pointer -= 1
        elif command == OP_INC:
            memory[pointer] = (memory[pointer] + 1) & 255
        elif command == OP_DEC:
            memory[pointer] = (memory[pointer] - 1) & 255
        elif command == OP_JZ:
            if memory[pointer] == 0:
                pc = jump_arr[pc]
        elif command == OP_JNZ:
            if memory[pointer] != 0:
                pc = jump_arr[pc]
        else:
            return pc, pointer, EVENT_HANDOFF, steps

        pc += 1
        steps += 1

    return pc, pointer, EVENT_END, steps
