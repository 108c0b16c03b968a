
from .lexer import Instruction, compile, locate, render, tokenize
from .ops_control import build_jump_table
from .program import Program
from .state import MEMORY_SIZE, MachineState
from .errors import BFIError, BFIIOError, OutOfBoundsError, UnbalancedJumpError
from .api import CompileOptions, compile_file, compile_string, run_string

__all__ = [
    'Instruction',
    'compile',
    'tokenize',
    'locate',
    'render',
    'build_jump_table',
    'Program',
    'MachineState',
    'MEMORY_SIZE',
    'BFIError',
    'BFIIOError',
    'OutOfBoundsError',
    'UnbalancedJumpError',
    'CompileOptions',
    'compile_string',
    'compile_file',
    'run_string',
]
