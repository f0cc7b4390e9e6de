from datetime import datetime

import pytest

from pvzgame import logger
from pvzgame.logger import Level, TermCmd, TermColor


def test_simple_escapes():
    assert logger.escape(TermCmd.BOLD) == "\033[1m"
    assert logger.escape(TermCmd.RESET) == "\033[0m"
    assert logger.escape(TermCmd.CLEAR) == "\033[2J\033[H"
    assert logger.escape(TermCmd.HIDE_CURSOR) == "\033[?25l"
    assert logger.escape(TermCmd.SHOW_CURSOR) == "\033[?25h"


def test_move_escape_uses_row_and_column():
    seq = logger.escape(TermCmd.MOVE, 7, 12)
    assert seq.startswith("\033[")
    assert seq.endswith("H")
    assert "7;12" in seq


def test_set_color_escape_uses_code():
    assert logger.escape(TermCmd.SET_COLOR, TermColor.RED) == f"\033[{int(TermColor.RED)}m"
    assert logger.escape(TermCmd.SET_COLOR, TermColor.BG_WHITE) == f"\033[{int(TermColor.BG_WHITE)}m"


@pytest.mark.parametrize(
    "cmd,args",
    [
        (TermCmd.MOVE, ()),
        (TermCmd.MOVE, (1,)),
        (TermCmd.SET_COLOR, ()),
        (TermCmd.SET_COLOR, (1, 2)),
        (TermCmd.BOLD, (TermColor.RED,)),
        (TermCmd.RESET, (1, 2)),
    ],
)
def test_escape_rejects_wrong_arguments(cmd, args):
    with pytest.raises(TypeError):
        logger.escape(cmd, *args)


def test_escape_rejects_unknown_command():
    with pytest.raises(ValueError):
        logger.escape("no-such-command")


def test_set_terminal_writes_sequence(capsys):
    logger.set_terminal(TermCmd.UNDERLINE)
    assert capsys.readouterr().out == "\033[4m"


def test_format_record_layout():
    now = datetime(2024, 1, 2, 3, 4, 5)
    line = logger.format_record(Level.ERROR, "Game.cpp", "update", 12, "boom", now)
    assert line == "[03:04:05] - ERROR - Game.cpp:update (12) - boom"


def test_format_record_pads_short_labels():
    now = datetime(2024, 1, 2, 3, 4, 5)
    line = logger.format_record(Level.INFO, "a.py", "f", 1, "m", now)
    assert " - INFO  - " in line


def test_error_reports_caller_and_colours(capsys):
    logger.error("value %d of %s", 5, "x")
    out = capsys.readouterr().out
    assert out.startswith(logger.escape(TermCmd.BOLD) + logger.escape(TermCmd.SET_COLOR, TermColor.RED))
    assert out.endswith("\n" + logger.escape(TermCmd.RESET))
    assert "- ERROR -" in out
    assert "test_logger.py:test_error_reports_caller_and_colours (" in out
    assert out.rstrip(logger.escape(TermCmd.RESET)).rstrip("\n").endswith("value 5 of x")


def test_info_is_not_bold(capsys):
    logger.info("hello")
    out = capsys.readouterr().out
    assert out.startswith(logger.escape(TermCmd.SET_COLOR, TermColor.GREEN))
    assert logger.escape(TermCmd.BOLD) not in out
    assert "- INFO  -" in out


def test_fatal_uses_background_and_foreground(capsys):
    logger.fatal("down")
    out = capsys.readouterr().out
    expected_prefix = (
        logger.escape(TermCmd.BOLD)
        + logger.escape(TermCmd.SET_COLOR, TermColor.BG_RED)
        + logger.escape(TermCmd.SET_COLOR, TermColor.WHITE)
    )
    assert out.startswith(expected_prefix)
    assert "- FATAL -" in out


@pytest.mark.parametrize(
    "func,label",
    [
        (logger.warning, "WARN "),
        (logger.warn, "WARN "),
        (logger.debug, "DEBUG"),
    ],
)
def test_level_helpers_use_their_label(capsys, func, label):
    func("msg")
    assert f"- {label} -" in capsys.readouterr().out


def test_log_reports_direct_caller(capsys):
    logger.log(Level.DEBUG, "%s%%", "50")
    out = capsys.readouterr().out
    assert "test_logger.py:test_log_reports_direct_caller (" in out
    assert "50%" in out


def test_message_without_args_keeps_percent(capsys):
    logger.info("100% done")
    assert "100% done" in capsys.readouterr().out