from enum import Enum
from typing import Dict, Iterable, List, Tuple


class Instruction(Enum):
    """One compiled Brainfuck command. The value is its source character."""

    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    JUMP_IF_ZERO = '['
    JUMP_IF_NONZERO = ']'
    DEBUG_PRINT = '#'

    @property
    def opcode(self) -> int:
        return OPCODES[self]

    def __repr__(self) -> str:
        return f"Instruction.{self.name}"


# Integer codes used by the compiled execution kernel.
OPCODES: Dict[Instruction, int] = {ins: code for code, ins in enumerate(Instruction)}

BF_COMMANDS = {ins.value: ins for ins in Instruction if ins is not Instruction.DEBUG_PRINT}
DEBUG_CHAR = Instruction.DEBUG_PRINT.value


def _commands_for(debug: bool) -> Dict[str, Instruction]:
    if not debug:
        return BF_COMMANDS
    table = dict(BF_COMMANDS)
    table[DEBUG_CHAR] = Instruction.DEBUG_PRINT
    return table


def tokenize(source: str, debug: bool = False) -> List[Instruction]:
    """
    Reduce source text to its instruction sequence.

    Every character outside the command set is a comment and is dropped.
    '#' is a command only when debug is enabled. Brackets are not checked
    here; that happens when the jump table is built.
    """
    commands = _commands_for(debug)
    return [commands[ch] for ch in source if ch in commands]


compile = tokenize


def locate(source: str, index: int, debug: bool = False) -> Tuple[int, int]:
    # 1-based (line, column) of the index-th command character in source.
    commands = _commands_for(debug)
    line, col = 1, 0
    seen = 0
    for ch in source:
        if ch == '\n':
            line += 1
            col = 0
            continue
        col += 1
        if ch in commands:
            if seen == index:
                return line, col
            seen += 1
    raise IndexError(f"Instruction index out of range: {index}")


def render(instructions: Iterable[Instruction]) -> str:
    return ''.join(ins.value for ins in instructions)
