# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Provide strategies for discovering CPU and NUMA node numbers.

A strategy (scanner) gets a function checking whether CPU or node number N exists, and yields the
existing numbers in ascending order.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from cpupropslibs.helperlibs.Exceptions import Error

if typing.TYPE_CHECKING:
    from typing import Iterator
    from cpupropslibs.CPUPropsTypes import IndexExistsType, ScannerType

def scan_contiguous(exists: IndexExistsType) -> Iterator[int]:
    """
    Yield numbers 0, 1, 2, etc, and stop at the first number that does not exist.

    Args:
        exists: The function checking if a number exists.

    Yields:
        The existing numbers.

    Notes:
        Numbering is assumed to be contiguous. On a system with a gap in the numbering (e.g., CPU 3
        was hot-removed), the numbers after the gap are not found.
    """

    index = 0
    while exists(index):
        yield index
        index += 1

def get_bounded_scanner(limit: int) -> ScannerType:
    """
    Return a scanner which checks numbers from 0 to 'limit - 1', skipping the gaps.

    Args:
        limit: The number to stop scanning at.

    Returns:
        The scanner function.
    """

    if limit < 0:
        raise Error(f"BUG: bad scan limit {limit}, must be a non-negative integer")

    def _scan_bounded(exists: IndexExistsType) -> Iterator[int]:
        """Yield all the existing numbers below 'limit'."""

        for index in range(limit):
            if exists(index):
                yield index

    return _scan_bounded
