#!/usr/bin/env python3
"""
Tests for the bfi command line.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

from bfi.cli import get_program_and_input, main

HELLO = "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return str(path)


def test_hello_world(tmp_path, capsysbinary):
    prog = _write(tmp_path, "hello.b", HELLO.encode())
    inp = _write(tmp_path, "empty.in", b"")
    assert main([prog, inp]) == 0
    assert capsysbinary.readouterr().out == b"Hello World!\n"


def test_separate_input_file(tmp_path, capsysbinary):
    prog = _write(tmp_path, "echo.b", b",.,.,.")
    inp = _write(tmp_path, "abc.in", b"abc")
    assert main([prog, inp, "--no-jit"]) == 0
    assert capsysbinary.readouterr().out == b"abc"


def test_program_and_input_in_one_file(tmp_path, capsysbinary):
    both = _write(tmp_path, "both.b", b"read three ,.,.,. then stop!xyz")
    assert main([both, both]) == 0
    assert capsysbinary.readouterr().out == b"xyz"


def test_separator_from_stdin():
    stdin = io.BytesIO(b",.!hi")
    program, input_stream = get_program_and_input("-", "-", stdin=stdin)
    assert program == ",.!"
    assert input_stream.read() == b"hi"


def test_program_from_stdin(tmp_path):
    inp = _write(tmp_path, "data.in", b"42")
    program, input_stream = get_program_and_input("-", inp, stdin=io.BytesIO(b"+."))
    try:
        assert program == "+."
        assert input_stream.read() == b"42"
    finally:
        input_stream.close()


def test_debug_flag(tmp_path, capsysbinary):
    prog = _write(tmp_path, "dbg.b", b"#+.")
    inp = _write(tmp_path, "empty.in", b"")
    assert main(["-d", prog, inp]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b"\x01"
    assert b"PC: 0 | PTR: 0" in captured.err

    assert main([prog, inp]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b"\x01"
    assert captured.err == b""


def test_runtime_fault_is_reported(tmp_path, capsysbinary):
    prog = _write(tmp_path, "left.b", b"+.<")
    inp = _write(tmp_path, "empty.in", b"")
    assert main([prog, inp]) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b"\x01"
    assert b"Error occurred during execution: OutOfBounds" in captured.err


def test_unbalanced_program_is_reported(tmp_path, capsysbinary):
    prog = _write(tmp_path, "open.b", b"+[")
    inp = _write(tmp_path, "empty.in", b"")
    assert main([prog, inp]) == 1
    assert b"UnbalancedJump: Unmatched '['" in capsysbinary.readouterr().err


def test_missing_file(tmp_path, capsysbinary):
    assert main([str(tmp_path / "nope.b"), str(tmp_path / "nope.in")]) == 1
    assert b"Error:" in capsysbinary.readouterr().err
