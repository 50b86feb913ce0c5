# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Discover NUMA nodes and read their statistics from sysfs.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from pathlib import Path
from cpupropslibs import _Discovery
from cpupropslibs.CPUPropsTypes import NodeRecord
from cpupropslibs.helperlibs import Logging, Trivial

if typing.TYPE_CHECKING:
    from typing import Final
    from cpupropslibs.CPUPropsTypes import ScannerType
    from cpupropslibs.helperlibs.SysReader import SysReader

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

SYSFS_BASE: Final[Path] = Path("/sys/devices/system/node")

# The 'numastat' file keys, which are also the 'NodeRecord' field names.
_NUMASTAT_KEYS: Final[tuple[str, ...]] = ("numa_hit", "numa_miss", "numa_foreign",
                                          "interleave_hit", "local_node", "other_node")

# The 'meminfo' file labels and the corresponding 'NodeRecord' field names.
_MEMINFO_KEYS: Final[dict[str, str]] = {"MemTotal": "memtotal", "MemUsed": "memused"}

def parse_numastat(text: str) -> dict[str, int]:
    """
    Parse contents of a node 'numastat' file.

    Args:
        text: The 'numastat' file contents, lines of "<key> <value>" pairs.

    Returns:
        A dictionary of 'NodeRecord' field names and values. Keys missing in 'text' are not
        included.
    """

    stats: dict[str, int] = {}
    for line in text.splitlines():
        split = line.split(maxsplit=1)
        if len(split) != 2:
            continue

        key, val = split
        if key in _NUMASTAT_KEYS and key not in stats:
            stats[key] = Trivial.str_to_uint(val)

    return stats

def parse_meminfo(text: str) -> dict[str, int]:
    """
    Parse contents of a node 'meminfo' file.

    Args:
        text: The 'meminfo' file contents, lines like "Node 0 MemTotal:  16303448 kB".

    Returns:
        A dictionary of 'NodeRecord' field names and values. Labels missing in 'text' are not
        included.
    """

    stats: dict[str, int] = {}
    for line in text.splitlines():
        label, sep, val = line.partition(":")
        if not sep or not label.split():
            continue

        # Drop the "Node <N>" prefix.
        label = label.split()[-1]
        key = _MEMINFO_KEYS.get(label)
        if key and key not in stats:
            stats[key] = Trivial.str_to_uint(val)

    return stats

def discover_nodes(reader: SysReader, scanner: ScannerType | None = None) -> list[NodeRecord]:
    """
    Discover NUMA nodes and read their statistics.

    A node exists if its 'numastat' file is readable and not empty. A missing or unreadable
    'meminfo' file does not stop discovery, memory statistics are 0 in this case.

    Args:
        reader: The sysfs reader object.
        scanner: The node numbers discovery strategy. Stop at the first missing node by default.

    Returns:
        The list of discovered nodes, in the order they were discovered.
    """

    if not scanner:
        scanner = _Discovery.scan_contiguous

    numastats: dict[int, str] = {}

    def _numastat_exists(node: int) -> bool:
        """Read the 'numastat' file of node 'node' and return 'True' if it is not empty."""

        numastats[node] = reader.get_file(SYSFS_BASE / f"node{node}" / "numastat")
        return bool(numastats[node])

    nodes: list[NodeRecord] = []
    for node in scanner(_numastat_exists):
        stats = parse_numastat(numastats[node])

        meminfo = reader.get_file(SYSFS_BASE / f"node{node}" / "meminfo")
        if meminfo:
            stats.update(parse_meminfo(meminfo))

        nodes.append(NodeRecord(index=node, **stats))
        _LOG.debug("found node %d: %s", node, nodes[-1])

    return nodes
