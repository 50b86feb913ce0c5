# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Read per-CPU network packet counters from '/proc/net/softnet_stat'.
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

PROC_SOFTNET_STAT: Final[Path] = Path("/proc/net/softnet_stat")

def parse_softnet_stat(text: str, cpus: Sequence[CPURecord]):
    """
    Parse '/proc/net/softnet_stat' contents and add the 'softnet_stat' property to CPU records.

    Line N belongs to the N-th CPU in 'cpus'. The first field of a line is the hexadecimal count of
    packets processed by the CPU. If there are fewer lines than CPUs, the rest of the CPUs do not
    get the property.

    Args:
        text: The '/proc/net/softnet_stat' file contents.
        cpus: The CPU records to add the property to.
    """

    for cpu, line in zip(cpus, text.splitlines()):
        cpu.add_prop("softnet_stat", Trivial.str_to_uint(line, base=16))

def collect(cpus: Sequence[CPURecord], reader: SysReader):
    """
    Add the 'softnet_stat' property to CPU records. Do nothing if '/proc/net/softnet_stat' cannot be
    read.

    Args:
        cpus: The CPU records to add the property to.
        reader: The procfs reader object.
    """

    text = reader.get_file(PROC_SOFTNET_STAT)
    if not text:
        _LOG.debug("no softnet statistics")
        return

    parse_softnet_stat(text, cpus)
