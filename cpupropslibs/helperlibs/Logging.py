# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Provide the project logger: prefixed and optionally colored messages, data output at the 'INFO'
level to standard output, and everything else to standard error.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import logging
import traceback
from typing import NoReturn, Any, IO, cast
import colorama

# Log levels. 'INFO' messages are printed as is, they are the tool output. 'NOTICE' is an 'INFO'
# message with a prefix, printed to standard error. 'ERRINFO' is an 'ERROR' message without a
# prefix.
INFO = logging.INFO
NOTICE = logging.INFO + 1
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
ERRINFO = logging.ERROR + 1
CRITICAL = logging.CRITICAL

# Name of the main logger instance. Other project loggers are supposed to be children of this one.
MAIN_LOGGER_NAME = "main"

# The prefix of debug messages: timestamp, module name and line number.
_DEBUG_PREFIX = "[%(asctime)s] [%(module)s,%(lineno)d]: "

# Names of prefixed message levels.
_LEVEL_NAMES = {NOTICE: "notice", WARNING: "warning", ERROR: "error", CRITICAL: "critical error"}

class _MyFormatter(logging.Formatter):
    """Format messages differently depending on the log level."""

    def __init__(self, prefix: str, colors: dict[int, str]):
        """
        Initialize a class instance.

        Args:
            prefix: The tool name to start prefixed messages with. Empty string for no tool name.
            colors: The log level to 'colorama' color code map. Empty map for no colors.
        """

        super().__init__(datefmt="%H:%M:%S")

        def _colorize(level: int, text: str) -> str:
            """Return 'text' wrapped into the color codes of log level 'level'."""

            if level not in colors:
                return text
            return colors[level] + text + colorama.Style.RESET_ALL

        self._fmts: dict[int, str] = {INFO: "%(message)s", ERRINFO: "%(message)s"}

        for level, name in _LEVEL_NAMES.items():
            if prefix:
                name = f"{prefix}: {name}"
            else:
                name = name.title()
            self._fmts[level] = _colorize(level, name) + ": %(message)s"

        dbg_prefix = _DEBUG_PREFIX.replace("[", "[" + colors.get(DEBUG, ""))
        if DEBUG in colors:
            dbg_prefix = dbg_prefix.replace("]", colorama.Style.RESET_ALL + "]")
        self._fmts[DEBUG] = dbg_prefix + "%(message)s"

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record using the format of its log level.

        Args:
            record: The log record to format.

        Returns:
            str: The formatted message.
        """

        # pylint: disable=protected-access
        self._style._fmt = self._fmts.get(record.levelno, "%(message)s")
        return super().format(record)

class _MyFilter(logging.Filter):
    """Let only messages of certain log levels through."""

    def __init__(self, let_go: set[int]):
        """
        Initialize a class instance.

        Args:
            let_go: The log levels to let through.
        """

        super().__init__()
        self._let_go = let_go

    def filter(self, record: logging.LogRecord) -> bool:
        """Return 'True' if the log level of 'record' is one of the allowed levels."""

        return record.levelno in self._let_go

class Logger(logging.Logger):
    """
    The project logger. On top of the standard logger, provide:
      * Per-level message prefixes and colors.
      * The 'NOTICE' and 'ERRINFO' log levels.
      * The 'error_out()' and 'debug_print_stacktrace()' methods.
    """

    def __init__(self, name: str | None = None):
        """
        Initialize a class instance.

        Args:
            name: The logger name (same as in 'logging.Logger()').
        """

        self.prefix = ""
        self.colored = False

        if not name:
            name = "default"

        super().__init__(name)

    def configure(self,
                  prefix: str | None = None,
                  level: int | None = None,
                  colored: bool | None = None,
                  info_stream: IO[str] = sys.stdout,
                  error_stream: IO[str] = sys.stderr) -> Logger:
        """
        Configure the logger.

        Args:
            prefix: The tool name to prefix messages of all levels except for 'INFO', 'ERRINFO',
                    and 'DEBUG' with.
            level: The log level. By default, 'DEBUG' if the '-d' or '--debug' command line option
                   is present, and 'INFO' otherwise.
            colored: Whether to color message prefixes. By default, color if both streams are
                     terminals or if the '--force-color' command line option is present.
            info_stream: The stream for 'INFO' messages.
            error_stream: The stream for messages of all other levels.

        Returns:
            Logger: The configured logger instance.
        """

        self.prefix = prefix if prefix else ""

        if not level:
            level = DEBUG if "-d" in sys.argv or "--debug" in sys.argv else INFO
        self.setLevel(level)

        if colored is None:
            colored = "--force-color" in sys.argv or \
                      (info_stream.isatty() and error_stream.isatty())
        self.colored = colored

        colors: dict[int, str] = {}
        if colored:
            colors[DEBUG] = colorama.Fore.GREEN
            colors[NOTICE] = colorama.Fore.CYAN + colorama.Style.BRIGHT
            colors[WARNING] = colorama.Fore.YELLOW + colorama.Style.BRIGHT
            colors[ERROR] = colors[CRITICAL] = colorama.Fore.RED + colorama.Style.BRIGHT

        formatter = _MyFormatter(self.prefix, colors)
        self.handlers = []

        for stream, levels in ((info_stream, {INFO}),
                               (error_stream, {DEBUG, NOTICE, WARNING, ERROR, ERRINFO, CRITICAL})):
            handler = logging.StreamHandler(stream)
            handler.setFormatter(formatter)
            handler.addFilter(_MyFilter(levels))
            self.addHandler(handler)

        return self

    def _print_traceback(self, level: int):
        """
        Log the traceback of the exception being handled, or the current stack if there is none.

        Args:
            level: The log level to use.
        """

        if sys.exc_info()[0]:
            tback = traceback.format_exc().rstrip()
        else:
            tback = "".join(traceback.format_stack()[:-2]).rstrip()

        if not tback:
            return

        dim = colorama.Style.DIM if self.colored else ""
        undim = colorama.Style.RESET_ALL if self.colored else ""
        self.log(level, "--- Debug trace starts here ---")
        self.log(level, "%s%s%s", dim, tback, undim)
        self.log(level, "--- Debug trace ends here ---")

    def error_out(self, fmt: str | Exception, *args: Any, print_tb: bool = False) -> NoReturn:
        """
        Print an error message and exit with code 1.

        Args:
            fmt: The error message format string or an exception object.
            *args: The arguments for the format string.
            print_tb: Print the traceback if 'True'. It is printed anyway in debug mode.
        """

        errmsg = str(fmt) % args if args else str(fmt)

        if print_tb or self.getEffectiveLevel() == DEBUG:
            self._print_traceback(ERRINFO)

        self.error(errmsg)
        raise SystemExit(1)

    def debug_print_stacktrace(self):
        """Print the current stack trace if debugging is enabled."""

        if self.getEffectiveLevel() == DEBUG:
            self._print_traceback(DEBUG)

    def notice(self, fmt: str, *args: Any):
        """
        Log a message with the 'NOTICE' level.

        Args:
            fmt: The message format string.
            *args: The arguments for the format string.
        """

        self.log(NOTICE, fmt, *args)

logging.setLoggerClass(Logger)

def getLogger(name: str | None = None) -> Logger:
    """
    Return a logger by name (same as 'logging.getLogger()', but returns a 'Logger' object).

    Args:
        name: The logger name.

    Returns:
        Logger: The logger object.
    """

    # 'setLoggerClass()' makes 'logging.getLogger()' create 'Logger' objects for all names except
    # the root logger.
    return cast(Logger, logging.getLogger(name=name))
