# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Command-line parsing helpers: dictionary-defined options and an argument parser with the standard
options of the project tools.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
import argparse
import argcomplete
from cpupropslibs.helperlibs.Exceptions import Error

if typing.TYPE_CHECKING:
    from typing import TypedDict, Iterable, Any

    class ArgKwargsTypedDict(TypedDict, total=False):
        """
        Keyword arguments of an option, passed to 'argparse.add_argument()' as is.

        Attributes:
            dest: Name of the namespace attribute to store the option value in.
            default: The value to use when the option is not specified.
            metavar: The option value name to use in the help text.
            action: The 'argparse' action, e.g., 'store_true'.
            help: The help text.
        """

        dest: str
        default: str | int | None
        metavar: str
        action: str | type[argparse.Action]
        help: str

    class ArgTypedDict(TypedDict, total=False):
        """
        A command-line option definition.

        Attributes:
            short: The short option name, e.g., '-n'. 'None' if the option has no short name.
            long: The long option name, e.g., '--cpu'.
            argcomplete: Name of the 'argcomplete.completers' class to complete the option value
                         with, 'None' for no completion.
            kwargs: The option keyword arguments.
        """

        short: str | None
        long: str
        argcomplete: str | None
        kwargs: ArgKwargsTypedDict

def add_options(parser: argparse.ArgumentParser, options: Iterable[ArgTypedDict]):
    """
    Add options defined by dictionaries to a parser.

    Args:
        parser: The parser to add the options to.
        options: The option definitions.
    """

    for opt in options:
        args: tuple[str, ...]

        if opt["short"] is None:
            args = (opt["long"], )
        else:
            args = (opt["short"], opt["long"])

        arg = parser.add_argument(*args, **opt["kwargs"])
        if opt["argcomplete"]:
            setattr(arg, "completer", getattr(argcomplete.completers, opt["argcomplete"])())

class ArgsParser(argparse.ArgumentParser):
    """
    An argument parser with the standard options of the project tools ('-h', '-d',
    '--force-color', and optionally '--version'), which raises 'Error' on bad arguments
    instead of exiting.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        """
        Initialize a class instance.

        Args:
            *args: Positional arguments for 'argparse.ArgumentParser'.
            **kwargs: Keyword arguments for 'argparse.ArgumentParser'. The additional 'ver'
                      argument is the tool version, adds the '--version' option if given.
        """

        if "ver" in kwargs:
            version = kwargs["ver"]
            del kwargs["ver"]
        else:
            version = None

        kwargs["add_help"] = False
        super().__init__(*args, **kwargs)

        text = "Show this help message and exit."
        self.add_argument("-h", "--help", dest="help", action="help", help=text)

        text = """Force colorized output even if the output stream is not a terminal (adds ANSI
                  escape codes)."""
        self.add_argument("--force-color", action="store_true", help=text)

        text = "Print debugging information, including every collected property."
        self.add_argument("-d", "--debug", dest="debug", action="store_true", help=text)

        if version:
            text = "Print the version number and exit."
            self.add_argument("--version", action="version", help=text, version=version)

    def error(self, message: str): # type: ignore[override]
        """
        Improve error messages from 'argparse.ArgumentParser'.

        Args:
            message: The original error message.
        """

        message += "\nUse -h for help."

        # Raise an error instead of calling the superclass method, because it exits the program.
        raise Error(message)
