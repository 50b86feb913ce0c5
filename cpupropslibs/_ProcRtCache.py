# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Read per-CPU routing cache statistics from '/proc/net/stat/rt_cache'.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from pathlib import Path
from cpupropslibs.helperlibs import Logging, Trivial

if typing.TYPE_CHECKING:
    from typing import Final, Sequence
    from cpupropslibs.CPUPropsTypes import CPURecord
    from cpupropslibs.helperlibs.SysReader import SysReader

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

PROC_RT_CACHE: Final[Path] = Path("/proc/net/stat/rt_cache")

# Property names for the first columns of a 'rt_cache' line.
_KEYS: Final[tuple[str, ...]] = ("rt_cache_entries", "rt_cache_in_hit", "rt_cache_in_slow_tot")

def parse_rt_cache(text: str, cpus: Sequence[CPURecord]):
    """
    Parse '/proc/net/stat/rt_cache' contents and add routing cache properties to CPU records.

    The first line is the header. Line N after the header belongs to the N-th CPU in 'cpus'. The
    first three hexadecimal columns are the number of entries, input hits, and input slow path
    total.

    Args:
        text: The '/proc/net/stat/rt_cache' file contents.
        cpus: The CPU records to add the properties to.
    """

    lines = text.splitlines()[1:]
    for cpu, line in zip(cpus, lines):
        for key, field in zip(_KEYS, line.split()):
            cpu.add_prop(key, Trivial.str_to_uint(field, base=16))

def collect(cpus: Sequence[CPURecord], reader: SysReader):
    """
    Add routing cache properties to CPU records. Do nothing if '/proc/net/stat/rt_cache' cannot be
    read.

    Args:
        cpus: The CPU records to add the properties to.
        reader: The procfs reader object.
    """

    text = reader.get_file(PROC_RT_CACHE)
    if not text:
        _LOG.debug("no routing cache statistics")
        return

    parse_rt_cache(text, cpus)
