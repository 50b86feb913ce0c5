# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Read per-CPU time accounting counters from '/proc/stat'.
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

PROC_STAT: Final[Path] = Path("/proc/stat")

# Property names for the counters of a "cpu<N>" line, in the column order. The last one ("guest")
# is missing on older kernels.
_KEYS: Final[tuple[str, ...]] = ("user", "nice", "system", "idle", "iowait", "irqtime",
                                 "softirqtime", "steal", "guest")

def parse_stat(text: str, cpus: Sequence[CPURecord]):
    """
    Parse '/proc/stat' contents and add time accounting properties to CPU records.

    Unlike other per-CPU files, lines are matched with CPU records by the CPU number in the line,
    e.g., "cpu3 ..." belongs to CPU 3. The aggregate "cpu ..." line is skipped.

    Args:
        text: The '/proc/stat' file contents.
        cpus: The CPU records to add the properties to.
    """

    cpus_by_index = {cpu.index: cpu for cpu in cpus}

    for line in text.splitlines():
        if not line.startswith("cpu") or line.startswith("cpu "):
            continue

        split = line.split()
        suffix = split[0][3:]
        if not suffix.isdigit():
            continue

        cpu = cpus_by_index.get(int(suffix))
        if cpu is None:
            _LOG.debug("'%s' has CPU %s, which was not discovered", PROC_STAT, suffix)
            continue

        for key, field in zip(_KEYS, split[1:]):
            cpu.add_prop(key, Trivial.str_to_uint(field))

def collect(cpus: Sequence[CPURecord], reader: SysReader):
    """
    Add time accounting properties to CPU records. Do nothing if '/proc/stat' cannot be read.

    Args:
        cpus: The CPU records to add the properties to.
        reader: The procfs reader object.
    """

    text = reader.get_file(PROC_STAT)
    if not text:
        _LOG.debug("no time accounting statistics")
        return

    parse_stat(text, cpus)
