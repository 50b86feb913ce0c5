# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""Read CPU identification information from '/proc/cpuinfo'."""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from pathlib import Path
from cpupropslibs.helperlibs import Logging

if typing.TYPE_CHECKING:
    from typing import Final, Sequence
    from cpupropslibs.CPUPropsTypes import CPURecord
    from cpupropslibs.helperlibs.SysReader import SysReader

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

PROC_CPUINFO: Final[Path] = Path("/proc/cpuinfo")

# The line prefixes of interesting '/proc/cpuinfo' lines and the corresponding property names.
# Note, the "model" line has to be matched with the tab, otherwise "model name" would match too.
_LABELS: Final[tuple[tuple[str, str], ...]] = (
    ("model name", "model_name"),
    ("flags", "flags"),
    ("cpu cores", "cpu_cores"),
    ("vendor_id", "vendor_id"),
    ("model\t", "model"),
    ("cpu family", "cpu_family"),
)

def _parse_cpuinfo_line(line: str, cpu: CPURecord):
    """
    Parse a single line of a '/proc/cpuinfo' CPU information block and add the corresponding
    property to the CPU record.

    Args:
        line: The line to parse, e.g., "cpu family	: 6".
        cpu: The CPU record the block belongs to.
    """

    for prefix, key in _LABELS:
        if not line.startswith(prefix):
            continue

        idx = line.find(":")
        if idx == -1:
            continue

        # The value starts after the colon and the following white-space character.
        cpu.add_prop(key, line[idx + 2:])

def parse_cpuinfo(text: str, cpus: Sequence[CPURecord]):
    """
    Parse '/proc/cpuinfo' contents and add CPU identification properties to CPU records.

    The file consists of blocks starting with a "processor : <N>" line. Blocks are matched with CPU
    records by position: the first block belongs to the first CPU in 'cpus', the second block to
    the second CPU, and so on. The CPU number in the "processor" line is not used. Lines before the
    first block and blocks beyond the last CPU record are ignored.

    Args:
        text: The '/proc/cpuinfo' file contents.
        cpus: The CPU records to add the properties to.
    """

    cpus_iter = iter(cpus)
    cpu: CPURecord | None = None

    for line in text.split("\n"):
        if line.startswith("processor"):
            cpu = next(cpus_iter, None)
            if cpu is None:
                # Stop at the first extra block rather than starting over from the first CPU.
                _LOG.debug("more CPU information blocks than CPUs in '%s'", PROC_CPUINFO)
                break

        if cpu is not None:
            _parse_cpuinfo_line(line, cpu)

def collect(cpus: Sequence[CPURecord], reader: SysReader):
    """
    Add CPU identification properties to CPU records. Do nothing if '/proc/cpuinfo' cannot be read.

    Args:
        cpus: The CPU records to add the properties to.
        reader: The procfs reader object.
    """

    text = reader.get_file(PROC_CPUINFO)
    if not text:
        _LOG.debug("no CPU identification information")
        return

    parse_cpuinfo(text, cpus)
