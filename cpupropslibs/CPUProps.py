# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Collect CPU and NUMA node properties from sysfs and procfs.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from cpupropslibs import _Nodes, _CPUs, _SysfsProps, _ProcSoftnet, _ProcInterrupts, ProcCpuinfo
from cpupropslibs import _ProcRtCache, _ProcStat
from cpupropslibs.helperlibs import Logging, ClassHelpers
from cpupropslibs.helperlibs.SysReader import SysReader

if typing.TYPE_CHECKING:
    from cpupropslibs.CPUPropsTypes import CPURecord, NodeRecord, ScannerType, NodeAssignerType

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

class CPUProps(ClassHelpers.SimpleCloseContext):
    """
    Collect a snapshot of CPU and NUMA node properties.

    Public methods overview.
        * 'collect()' - discover nodes and CPUs, and collect CPU properties.

    Public attributes.
        * 'nodes' - the list of discovered NUMA nodes ('NodeRecord' objects).
        * 'cpus' - the list of discovered CPUs ('CPURecord' objects) with their properties.
    """

    def __init__(self,
                 reader: SysReader | None = None,
                 scanner: ScannerType | None = None,
                 node_assigner: NodeAssignerType | None = None):
        """
        Initialize a class instance.

        Args:
            reader: The sysfs and procfs reader object. If not provided, a reader of the local host
                    files is created.
            scanner: The CPU and node numbers discovery strategy. Stop at the first missing number
                     by default.
            node_assigner: The CPU to node assignment strategy. Use the first node the CPU has a
                           sysfs node link for by default.
        """

        _LOG.debug("Initializing the '%s' class object", self.__class__.__name__)

        self._close_reader = reader is None

        if reader:
            self._reader = reader
        else:
            self._reader = SysReader()

        self._scanner = scanner

        if node_assigner:
            self._node_assigner = node_assigner
        else:
            self._node_assigner = _CPUs.first_node_assigner(self._reader)

        self.nodes: list[NodeRecord] = []
        self.cpus: list[CPURecord] = []

    def close(self):
        """Uninitialize the class object."""

        _LOG.debug("Closing the '%s' class object", self.__class__.__name__)

        ClassHelpers.close(self, close_attrs=("_reader",))

    def collect(self) -> list[CPURecord]:
        """
        Discover NUMA nodes and CPUs, and collect CPU properties.

        The order is fixed: nodes, CPUs, node assignment, sysfs properties, softnet statistics,
        interrupts, CPU identification, routing cache statistics, and time accounting statistics.
        The order of the collectors defines the order of CPU properties.

        Returns:
            The list of CPU records, also available via the 'cpus' attribute.
        """

        self.nodes = _Nodes.discover_nodes(self._reader, scanner=self._scanner)
        self.cpus = _CPUs.discover_cpus(self._reader, scanner=self._scanner)
        _CPUs.assign_nodes(self.cpus, self.nodes, self._node_assigner)

        _SysfsProps.collect(self.cpus, self.nodes, self._reader)
        _ProcSoftnet.collect(self.cpus, self._reader)
        _ProcInterrupts.collect(self.cpus, self._reader)
        ProcCpuinfo.collect(self.cpus, self._reader)
        _ProcRtCache.collect(self.cpus, self._reader)
        _ProcStat.collect(self.cpus, self._reader)

        _LOG.debug("collected properties of %d CPUs%s", len(self.cpus), self._reader.hostmsg)
        return self.cpus
