from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _build_code_context(code: str, index: int, *, context: int = 8) -> str:
    # Single-line excerpt of the compiled program with a caret under `index`.
    start = max(0, index - context)
    end = min(len(code), index + context + 1)
    excerpt = code[start:end]
    caret = ' ' * (index - start) + '^'
    return f"> {start:4d} | {excerpt}\n       {caret}"


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'jump':
        if "unmatched ']'" in msg:
            return "Every ']' needs an earlier '[' that is still open. Remove the ']' or add a '[' before it."
        if "unmatched '['" in msg:
            return "A loop was opened but never closed. Add the missing ']'."
        return None
    if kind == 'bounds':
        if 'left' in msg:
            return 'The tape does not wrap: cell 0 is the leftmost cell.'
        if 'right' in msg:
            return 'The tape does not wrap: the last cell is 29999.'
        return None
    return None


@dataclass
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnbalancedJumpError(BFIError):
    index: int
    line: int
    context: str


@dataclass
class OutOfBoundsError(BFIError):
    pc: int
    ptr: int


@dataclass
class BFIIOError(BFIError):
    pc: int


def make_jump_error(*, message: str, index: int, code: str, source: Optional[str] = None,
                    line: int = 0) -> UnbalancedJumpError:
    if source is not None and line > 0:
        ctx = _build_context(source.split('\n'), line)
        where = f"instruction {index}, line {line}"
    else:
        ctx = _build_code_context(code, index)
        where = f"instruction {index}"
    hint = _hint_for(message, kind='jump')
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnbalancedJumpError(
        message=f"UnbalancedJump: {message} ({where})\n{ctx}{hint_block}",
        index=index,
        line=line,
        context=ctx,
    )


def make_bounds_error(*, message: str, pc: int, ptr: int) -> OutOfBoundsError:
    hint = _hint_for(message, kind='bounds')
    hint_block = f"\nHint: {hint}" if hint else ""
    return OutOfBoundsError(
        message=f"OutOfBounds: {message} (pc {pc}, ptr {ptr}){hint_block}",
        pc=pc,
        ptr=ptr,
    )


def make_io_error(*, message: str, pc: int, cause: OSError) -> BFIIOError:
    return BFIIOError(message=f"IOFault: {message} (pc {pc}): {cause}", pc=pc)
