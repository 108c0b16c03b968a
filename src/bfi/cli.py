from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, List, Optional, Tuple

from .api import CompileOptions, compile_string
from .errors import BFIError, UnbalancedJumpError

SEPARATOR = b'!'
STDIO = '-'


def _read_until(stream: BinaryIO, delimiter: bytes) -> bytes:
    # Consumes the delimiter too; everything after it is left in the stream.
    buf = bytearray()
    while True:
        ch = stream.read(1)
        if not ch:
            break
        buf += ch
        if ch == delimiter:
            break
    return bytes(buf)


def get_program_and_input(prog_arg: str, input_arg: str, *, stdin: Optional[BinaryIO] = None
                          ) -> Tuple[str, BinaryIO]:
    """
    Resolve the program text and the input stream from the two CLI arguments.

    When both name the same source, the program is everything up to and
    including the first '!' and the rest of that source is the input.
    """
    stdin = sys.stdin.buffer if stdin is None else stdin

    if prog_arg == input_arg:
        source = stdin if input_arg == STDIO else open(prog_arg, 'rb')
        program = _read_until(source, SEPARATOR)
        return program.decode('utf-8'), source

    if prog_arg == STDIO:
        program = stdin.read()
    else:
        with open(prog_arg, 'rb') as f:
            program = f.read()

    input_stream = stdin if input_arg == STDIO else open(input_arg, 'rb')
    return program.decode('utf-8'), input_stream


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='bfi',
        description='A simple brainfuck interpreter.',
        epilog="If both PROGRAM and INPUT are to be read from the same source, '!' will be treated as a separator",
    )
    parser.add_argument('program', metavar='PROGRAM', help="Sets the program source, '-' will read the program from stdin")
    parser.add_argument('input', metavar='INPUT', nargs='?', default=STDIO, help='Input file, defaults to stdin')
    parser.add_argument('-d', '--debug', action='store_true', help="Enables the use of '#' as a debug print command")
    parser.add_argument('--no-jit', action='store_true', help='Run every instruction in the Python interpreter loop')
    args = parser.parse_args(argv)

    options = CompileOptions(debug=args.debug, jit=not args.no_jit)

    try:
        program_raw, input_stream = get_program_and_input(args.program, args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        try:
            program = compile_string(program_raw, options=options)
        except UnbalancedJumpError as e:
            print(e, file=sys.stderr)
            return 1

        output = sys.stdout.buffer
        try:
            program.run(input_stream, output, jit=options.jit)
            output.flush()
        except BFIError as e:
            print(f"Error occurred during execution: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Error occurred during execution: IOFault: {e}", file=sys.stderr)
            return 1
    finally:
        if args.input != STDIO:
            input_stream.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
