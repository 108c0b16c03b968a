#!/usr/bin/env python3
"""
Tests for reducing source text to instructions.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfi import Instruction, Program, compile, locate, render, tokenize


def test_every_command_character():
    assert compile("><+-.,[]") == [
        Instruction.MOVE_RIGHT,
        Instruction.MOVE_LEFT,
        Instruction.INCREMENT,
        Instruction.DECREMENT,
        Instruction.OUTPUT,
        Instruction.INPUT,
        Instruction.JUMP_IF_ZERO,
        Instruction.JUMP_IF_NONZERO,
    ]


def test_comments_are_dropped():
    assert compile("add one: + then print it . done") == [Instruction.INCREMENT, Instruction.OUTPUT]
    assert compile("no commands here!") == []
    assert compile("") == []


def test_debug_flag_controls_pound():
    assert compile("#+.", True) == [Instruction.DEBUG_PRINT, Instruction.INCREMENT, Instruction.OUTPUT]
    assert compile("#+.", False) == [Instruction.INCREMENT, Instruction.OUTPUT]
    assert Program.compile("#+.", False) == tokenize("#+.")


def test_compilation_is_deterministic():
    src = "++[>+<-]>. some text # more"
    assert compile(src, True) == compile(src, True)
    assert Program.from_str(src) == Program.from_str(src)


def test_render_round_trips_command_text():
    assert render(compile("a+b[c>d]e.")) == "+[>]."


def test_locate_reports_line_and_column():
    src = "+ comment\n  [\n-]"
    assert locate(src, 0) == (1, 1)
    assert locate(src, 1) == (2, 3)
    assert locate(src, 3) == (3, 2)


def test_locate_honours_debug_flag():
    assert locate("#+", 0, debug=True) == (1, 1)
    assert locate("#+", 0, debug=False) == (1, 2)
    with pytest.raises(IndexError):
        locate("+", 1)


def test_opcodes_are_distinct():
    codes = [ins.opcode for ins in Instruction]
    assert len(set(codes)) == len(codes)
