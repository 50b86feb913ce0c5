# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Collect static per-CPU properties from sysfs: NUMA node statistics, frequency, topology, and caches.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from cpupropslibs._CPUs import SYSFS_BASE
from cpupropslibs.helperlibs import Logging, Trivial

if typing.TYPE_CHECKING:
    from typing import Final, Literal, Sequence
    from cpupropslibs.CPUPropsTypes import CPURecord, NodeRecord
    from cpupropslibs.helperlibs.SysReader import SysReader

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

# The per-CPU sysfs files to read, in the order properties are added. Each entry is a tuple of the
# property name, path relative to the CPU sysfs directory, and file contents type: "int" for a
# decimal number, "str" for text (only the first line is used).
_FILES: Final[tuple[tuple[str, str, Literal["int", "str"]], ...]] = (
    ("cur_freq", "cpufreq/cpuinfo_cur_freq", "int"),
    ("max_freq", "cpufreq/cpuinfo_max_freq", "int"),
    ("physical_package_id", "topology/physical_package_id", "int"),
    ("core_siblings_list", "topology/core_siblings_list", "str"),
    ("thread_siblings_list", "topology/thread_siblings_list", "str"),
    ("cache0_size", "cache/index0/size", "str"),
    ("cache0_type", "cache/index0/type", "str"),
    ("cache1_size", "cache/index1/size", "str"),
    ("cache1_type", "cache/index1/type", "str"),
    ("cache2_size", "cache/index2/size", "str"),
    ("cache2_type", "cache/index2/type", "str"),
    ("cache3_size", "cache/index3/size", "str"),
    ("cache3_type", "cache/index3/type", "str"),
    ("core_id", "topology/core_id", "int"),
    ("scaling_governor", "cpufreq/scaling_governor", "str"),
)

def _add_node_props(cpu: CPURecord, node: NodeRecord):
    """Add NUMA node properties of node 'node' to CPU 'cpu'."""

    cpu.add_prop("node", node.index)
    cpu.add_prop("numa_hit", node.numa_hit)
    cpu.add_prop("numa_miss", node.numa_miss)
    cpu.add_prop("memtotal", node.memtotal)
    cpu.add_prop("memused", node.memused)

def collect(cpus: Sequence[CPURecord], nodes: Sequence[NodeRecord], reader: SysReader):
    """
    Add static sysfs properties to CPU records.

    Args:
        cpus: The CPU records to add the properties to.
        nodes: The node registry the 'node' attribute of CPU records refers to.
        reader: The sysfs reader object.
    """

    for cpu in cpus:
        _LOG.debug("reading sysfs properties of CPU %d", cpu.index)

        if cpu.node is not None:
            _add_node_props(cpu, nodes[cpu.node])

        for key, relpath, ftype in _FILES:
            text = reader.get_file(SYSFS_BASE / f"cpu{cpu.index}" / relpath)
            if not text:
                continue

            if ftype == "int":
                cpu.add_prop(key, Trivial.str_to_uint(text))
            else:
                cpu.add_prop(key, Trivial.first_line(text))
