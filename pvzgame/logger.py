"""Coloured terminal logging with caller information."""

from __future__ import annotations

import inspect
import os
import sys
from datetime import datetime
from enum import Enum, IntEnum


class TermColor(IntEnum):
    """ANSI SGR colour codes for foreground and background."""

    DEFAULT = 39
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37

    BG_DEFAULT = 49
    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_PURPLE = 45
    BG_CYAN = 46
    BG_WHITE = 47


class TermCmd(Enum):
    """Terminal control commands."""

    CLEAR = "clear"
    BOLD = "bold"
    UNDERLINE = "underline"
    RESET = "reset"
    MOVE_HOME = "move_home"
    HIDE_CURSOR = "hide_cursor"
    SHOW_CURSOR = "show_cursor"
    MOVE = "move"
    SET_COLOR = "set_color"


class Level(Enum):
    """Log levels; the value is the padded label printed in each record."""

    ERROR = "ERROR"
    WARN = "WARN "
    INFO = "INFO "
    DEBUG = "DEBUG"
    FATAL = "FATAL"

    @property
    def label(self) -> str:
        return self.value


_SIMPLE_ESCAPES = {
    TermCmd.CLEAR: "\033[2J\033[H",
    TermCmd.BOLD: "\033[1m",
    TermCmd.UNDERLINE: "\033[4m",
    TermCmd.RESET: "\033[0m",
    TermCmd.MOVE_HOME: "\033[H",
    TermCmd.HIDE_CURSOR: "\033[?25l",
    TermCmd.SHOW_CURSOR: "\033[?25h",
}


def escape(cmd: TermCmd, *args) -> str:
    """Return the escape sequence for a terminal command.

    MOVE takes a row and a column, SET_COLOR takes a TermColor; every other
    command takes no arguments. Wrong arguments raise TypeError and an
    unknown command raises ValueError.
    """
    cmd = TermCmd(cmd)
    if cmd is TermCmd.MOVE:
        if len(args) != 2:
            raise TypeError("Move command requires int row and int column arguments")
        row, col = args
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in args):
            raise TypeError("Move command requires int row and int column arguments")
        return f"\033[{row};{col}H"
    if cmd is TermCmd.SET_COLOR:
        if len(args) != 1 or not isinstance(args[0], TermColor):
            raise TypeError("SetColor command requires a TermColor color argument")
        return f"\033[{int(args[0])}m"
    if args:
        raise TypeError(f"{cmd.name} command takes no arguments")
    return _SIMPLE_ESCAPES[cmd]


def set_terminal(cmd: TermCmd, *args) -> None:
    """Write the escape sequence for a terminal command to standard output."""
    sys.stdout.write(escape(cmd, *args))


_LEVEL_STYLES = {
    Level.ERROR: ((TermCmd.BOLD,), (TermCmd.SET_COLOR, TermColor.RED)),
    Level.WARN: ((TermCmd.BOLD,), (TermCmd.SET_COLOR, TermColor.YELLOW)),
    Level.INFO: ((TermCmd.SET_COLOR, TermColor.GREEN),),
    Level.DEBUG: ((TermCmd.BOLD,), (TermCmd.SET_COLOR, TermColor.BLUE)),
    Level.FATAL: (
        (TermCmd.BOLD,),
        (TermCmd.SET_COLOR, TermColor.BG_RED),
        (TermCmd.SET_COLOR, TermColor.WHITE),
    ),
}


def format_record(level: Level, file: str, func: str, line: int, message: str, now: datetime) -> str:
    """Build one log line, without colours or a trailing newline."""
    level = Level(level)
    return f"[{now:%H:%M:%S}] - {level.label} - {file}:{func} ({line}) - {message}"


def _emit(level: Level, message: str, args: tuple, depth: int) -> None:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None or frame.f_back is None:
                break
            frame = frame.f_back
        if frame is None:
            file, func, line = "?", "?", 0
        else:
            file = os.path.basename(frame.f_code.co_filename)
            func = frame.f_code.co_name
            line = frame.f_lineno
    finally:
        del frame

    text = message % args if args else message
    level = Level(level)
    prefix = "".join(escape(*style) for style in _LEVEL_STYLES[level])
    record = format_record(level, file, func, line, text, datetime.now())
    out = sys.stdout
    out.write(f"{prefix}{record}\n{escape(TermCmd.RESET)}")
    out.flush()


def log(level: Level, message: str, *args) -> None:
    """Write a record at the given level; args are applied printf-style."""
    _emit(level, message, args, 2)


def error(message: str, *args) -> None:
    """Write an ERROR record."""
    _emit(Level.ERROR, message, args, 2)


def warning(message: str, *args) -> None:
    """Write a WARN record."""
    _emit(Level.WARN, message, args, 2)


def warn(message: str, *args) -> None:
    """Write a WARN record."""
    _emit(Level.WARN, message, args, 2)


def info(message: str, *args) -> None:
    """Write an INFO record."""
    _emit(Level.INFO, message, args, 2)


def debug(message: str, *args) -> None:
    """Write a DEBUG record."""
    _emit(Level.DEBUG, message, args, 2)


def fatal(message: str, *args) -> None:
    """Write a FATAL record."""
    _emit(Level.FATAL, message, args, 2)