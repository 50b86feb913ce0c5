# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Authors: Antti Laakso <antti.laakso@intel.com>
#          Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""This module contains helper functions for test runners."""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import logging
import typing

if typing.TYPE_CHECKING:
    from types import ModuleType
    from typing import Any

logging.basicConfig(level=logging.DEBUG)
_LOG = logging.getLogger()

def run_tool(tool: ModuleType,
             toolname: str,
             arguments: str | list[str],
             exp_exc: type[Exception] | None = None) -> Any:
    """
    Run a tool command and verify the outcome.

    Args:
        tool: The main Python module of the tool to run.
        toolname: The name of the tool to run, used in error messages.
        arguments: The arguments to run the command with, e.g. '-n 1 cur_freq'. A string is split
                   by white-spaces, use a list for arguments including white-spaces.
        exp_exc: The expected exception. By default, any exception is considered to be a failure.
                 But when set, the test is considered to be a failure if the command did not raise
                 the expected exception.

    Returns:
        The value returned by the command function, or 'None' if the expected exception was raised.
    """

    if isinstance(arguments, str):
        arguments = arguments.split()

    cmdline = " ".join(arguments)
    _LOG.debug("running: %s %s", toolname, cmdline)
    sys.argv = [str(tool.__file__)] + arguments

    try:
        args = tool.parse_arguments()
        ret = args.func(args)
    except Exception as err: # pylint: disable=broad-except
        if exp_exc is None:
            assert False, f"command '{toolname} {cmdline}' raised the following exception:\n" \
                          f"- {type(err).__name__}({err})"

        if isinstance(err, exp_exc):
            return None

        assert False, f"command '{toolname} {cmdline}' raised the following exception:\n" \
                      f"- {type(err).__name__}({err})\nbut it was expected to raise the " \
                      f"following exception:\n- {exp_exc.__name__}"

    if exp_exc is not None:
        assert False, f"command '{toolname} {cmdline}' did not raise the following " \
                      f"exception type:\n- {exp_exc.__name__}"

    return ret
