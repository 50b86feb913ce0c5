# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Discover CPUs and assign them to NUMA nodes.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from pathlib import Path
from cpupropslibs import _Discovery
from cpupropslibs.CPUPropsTypes import CPURecord
from cpupropslibs.helperlibs import Logging
from cpupropslibs.helperlibs.Exceptions import Error

if typing.TYPE_CHECKING:
    from typing import Final, Iterable, Sequence
    from cpupropslibs.CPUPropsTypes import ScannerType, NodeAssignerType, NodeRecord
    from cpupropslibs.helperlibs.SysReader import SysReader

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

SYSFS_BASE: Final[Path] = Path("/sys/devices/system/cpu")

def discover_cpus(reader: SysReader, scanner: ScannerType | None = None) -> list[CPURecord]:
    """
    Discover CPUs. A CPU exists if its sysfs directory exists, nothing is read at this point.

    Args:
        reader: The sysfs reader object.
        scanner: The CPU numbers discovery strategy. Stop at the first missing CPU by default.

    Returns:
        The list of CPU records without properties, in the order they were discovered.
    """

    if not scanner:
        scanner = _Discovery.scan_contiguous

    def _cpu_exists(cpu: int) -> bool:
        """Return 'True' if CPU 'cpu' exists."""
        return reader.exists(SYSFS_BASE / f"cpu{cpu}")

    cpus = [CPURecord(cpu) for cpu in scanner(_cpu_exists)]
    _LOG.debug("found %d CPUs", len(cpus))
    return cpus

def first_node_assigner(reader: SysReader) -> NodeAssignerType:
    """
    Return the default node assignment strategy.

    The strategy picks the first node (in node registry order) for which the
    '/sys/devices/system/cpu/cpu<C>/node<N>' link exists. If several links exist, the first one
    wins.

    Args:
        reader: The sysfs reader object.

    Returns:
        The node assignment function.
    """

    def _assign_first(cpu: int, nodes: Iterable[int]) -> int | None:
        """Return the first node number 'cpu' has a node link for."""

        for node in nodes:
            if reader.exists(SYSFS_BASE / f"cpu{cpu}" / f"node{node}"):
                return node
        return None

    return _assign_first

def assign_nodes(cpus: Sequence[CPURecord], nodes: Sequence[NodeRecord],
                 assigner: NodeAssignerType):
    """
    Assign CPUs to NUMA nodes.

    Args:
        cpus: The CPU records to assign. The 'node' attribute of each record is set to the index of
              the node in 'nodes', or left 'None' if the CPU does not belong to any node.
        nodes: The node registry.
        assigner: The node assignment strategy.
    """

    positions = {node.index: pos for pos, node in enumerate(nodes)}
    node_indices = list(positions)

    for cpu in cpus:
        node = assigner(cpu.index, node_indices)
        if node is None:
            _LOG.debug("CPU %d does not belong to any node", cpu.index)
            continue

        if node not in positions:
            raise Error(f"BUG: CPU {cpu.index} was assigned to non-existing node {node}")

        cpu.node = positions[node]
