from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .program import Program


@dataclass(frozen=True)
class CompileOptions:
    debug: bool = False
    jit: bool = True


def compile_string(source: str, *, options: Optional[CompileOptions] = None, debug_stream=None) -> Program:
    debug = False if options is None else options.debug
    return Program.from_str(source, debug=debug, debug_stream=debug_stream)


def compile_file(path: str | Path, *, options: Optional[CompileOptions] = None, encoding: str = "utf-8",
                 debug_stream=None) -> Program:
    p = Path(path)
    return compile_string(p.read_text(encoding=encoding), options=options, debug_stream=debug_stream)


def run_string(source: str, input_data: bytes = b"", *, options: Optional[CompileOptions] = None,
               debug_stream=None) -> bytes:
    """Compile source, run it once on a fresh tape, and return everything it printed."""
    jit = True if options is None else options.jit
    program = compile_string(source, options=options, debug_stream=debug_stream)
    out = io.BytesIO()
    program.run(io.BytesIO(input_data), out, jit=jit)
    return out.getvalue()
