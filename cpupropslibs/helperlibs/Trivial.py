# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Common trivial helpers.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import re
import typing
from cpupropslibs.helperlibs.Exceptions import Error, ErrorBadFormat

if typing.TYPE_CHECKING:
    from typing import Final

# The largest value of an unsigned 64-bit integer.
UINT64_MAX: Final[int] = 2**64 - 1

# Regular expressions matching the leading unsigned integer of a string, per base.
_UINT_REGEXES: Final[dict[int, re.Pattern[str]]] = {
    10: re.compile(r"^\s*\+?([0-9]+)"),
    16: re.compile(r"^\s*\+?(?:0[xX])?([0-9a-fA-F]+)"),
}

def str_to_int(snum: str | int, base: int = 0, what: str = "") -> int:
    """
    Convert a string to an integer value.

    Args:
        snum: The value to convert to 'int'.
        base: Base of 'snum'. Defaults to auto-detect based on the prefix.
        what: A string describing the value to convert, for the possible error message.

    Returns:
        int: The converted integer value.

    Raises:
        ErrorBadFormat: If 'snum' cannot be converted to an integer.
    """

    try:
        num = int(str(snum), base)
    except (ValueError, TypeError):
        if not what:
            what = "value"

        if base != 0 and base < 2:
            raise Error(f"BUG: Bad base value {base} when converting bad {what} '{snum}': must be "
                        f"greater than 2 or 0") from None

        if base:
            errmsg = f"a base {base} integer"
        else:
            errmsg = "an integer"
        raise ErrorBadFormat(f"Bad {what} '{snum}': should be {errmsg}") from None

    return num

def str_to_uint(snum: str, base: int = 10) -> int:
    """
    Convert the leading unsigned integer of a string to an 'int' on the best-effort basis.

    Leading white-spaces are skipped and conversion stops at the first character which is not a
    digit of the base. A string without leading digits is converted to 0. The result is clamped to
    'UINT64_MAX'.

    Args:
        snum: The string to convert.
        base: Base of the number, 10 or 16. Hexadecimal numbers may have the '0x' prefix.

    Returns:
        int: The converted integer value.

    Examples:
        str_to_uint("  123 kB") -> 123
        str_to_uint("0000001a", base=16) -> 26
        str_to_uint("bogus") -> 0
    """

    try:
        regex = _UINT_REGEXES[base]
    except KeyError:
        raise Error(f"BUG: Unsupported base {base}, use one of: "
                    f"{', '.join(str(key) for key in _UINT_REGEXES)}") from None

    mobj = regex.match(snum)
    if not mobj:
        return 0

    return min(int(mobj.group(1), base), UINT64_MAX)

def first_line(text: str) -> str:
    """
    Return the part of 'text' before the first newline character.

    Args:
        text: The text to return the first line of.

    Returns:
        str: The first line of 'text' without the newline character.
    """

    return text.split("\n", 1)[0]
