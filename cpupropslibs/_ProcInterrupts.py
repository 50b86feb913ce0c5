# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Count interrupts handled by each CPU using '/proc/interrupts'.
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

PROC_INTERRUPTS: Final[Path] = Path("/proc/interrupts")

def parse_interrupts(text: str, cpus: Sequence[CPURecord]):
    """
    Parse '/proc/interrupts' contents and add the 'irqs' property to every CPU.

    Every line except for the header has the "<IRQ>: <count> <count> ..." format, with one count
    column per CPU. Columns are matched with CPUs in the 'cpus' order, the CPU numbers in the header
    are not looked at.

    Args:
        text: The '/proc/interrupts' file contents.
        cpus: The CPU records to add the 'irqs' property to.
    """

    for line in text.splitlines():
        _, sep, counts = line.partition(":")
        if not sep:
            # The header line.
            continue

        # Columns beyond the last CPU are not looked at. A non-numeric column (e.g., a device name
        # in a row with fewer counts than CPUs) counts as 0.
        for cpu, count in zip(cpus, counts.split()):
            cpu.irqs = (cpu.irqs + Trivial.str_to_uint(count)) & Trivial.UINT64_MAX

    for cpu in cpus:
        cpu.add_prop("irqs", cpu.irqs)

def collect(cpus: Sequence[CPURecord], reader: SysReader):
    """
    Add the 'irqs' property to CPU records. Do nothing if '/proc/interrupts' cannot be read.

    Args:
        cpus: The CPU records to add the property to.
        reader: The procfs reader object.
    """

    text = reader.get_file(PROC_INTERRUPTS)
    if not text:
        _LOG.debug("no interrupts information")
        return

    parse_interrupts(text, cpus)
