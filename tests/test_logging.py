"""Tests for the console logger."""

import io

import pytest

from chip8vm import Interpreter, UnknownOpcode
from chip8vm.logging import ConsoleLogger, get_logger


def make_logger(level="INFO"):
    stream = io.StringIO()
    return ConsoleLogger("test", log_level=level, show_timestamps=False, stream=stream), stream


def test_level_filtering():
    logger, stream = make_logger("WARNING")
    logger.info("hidden")
    logger.warning("shown")
    assert "hidden" not in stream.getvalue()
    assert "[ WARNING][test] shown" in stream.getvalue()


def test_unknown_level():
    with pytest.raises(ValueError):
        ConsoleLogger(log_level="LOUD")


def test_get_logger_is_cached():
    assert get_logger("cached") is get_logger("cached")


def test_interpreter_logs_trace_and_fault(framebuffer, keypad):
    logger, stream = make_logger("DEBUG")
    interpreter = Interpreter.from_rom(b"\x60\x01\xF0\xFF", logger=logger)

    interpreter.execute_one_cycle(framebuffer, keypad)
    with pytest.raises(UnknownOpcode):
        interpreter.execute_one_cycle(framebuffer, keypad)

    output = stream.getvalue()
    assert "Loaded ROM (4 bytes)" in output
    assert "0x200: 6001" in output
    assert "Unknown opcode 0xF0FF at 0x202" in output
