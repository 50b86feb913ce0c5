# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Types for the CPU properties model: NUMA node records, CPU records and their properties, and the
query configuration.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

from typing import NamedTuple, Callable, Iterable, Iterator, Literal
from cpupropslibs.helperlibs import Logging

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

# The query modes, see 'Query.get_mode()'.
QueryModeType = Literal["keys", "all", "cpus"]

# A function checking if CPU or node number 'index' exists.
IndexExistsType = Callable[[int], bool]

# A discovery strategy: yield the existing CPU or node numbers, in ascending order, using the
# "index exists" function.
ScannerType = Callable[[IndexExistsType], Iterable[int]]

# A node assignment strategy: return the node number for a CPU number given the node numbers in
# node registry order, or 'None' if the CPU does not belong to any of them.
NodeAssignerType = Callable[[int, Iterable[int]], "int | None"]

class PropertyType(NamedTuple):
    """
    A CPU property.

    Attributes:
        key: The property name, e.g., "cur_freq".
        value: The property value as a string.
    """

    key: str
    value: str

class SelectedPropType(NamedTuple):
    """
    A single result of a CPU properties query.

    Attributes:
        cpu: The CPU number.
        key: The property name, 'None' if only the CPU number was selected.
        value: The property value, 'None' if only the CPU number was selected.
    """

    cpu: int
    key: str | None
    value: str | None

class QueryConfigType(NamedTuple):
    """
    The CPU properties query and output configuration.

    Attributes:
        keys: Names of the properties to select. Takes precedence over 'listall'.
        listall: Select all properties of a CPU.
        nowhite: Replace white-space characters in property values with '_'.
        prefix: The string to prepend to every property value.
        suffix: The string to append to every property value.
        cpu: Select only this CPU number. 'None' means all CPUs (the listing mode).
        yaml: Print in YAML format instead of text lines.
    """

    keys: tuple[str, ...] = ()
    listall: bool = False
    nowhite: bool = False
    prefix: str = ""
    suffix: str = ""
    cpu: int | None = None
    yaml: bool = False

class NodeRecord(NamedTuple):
    """
    A NUMA node and its statistics.

    Attributes:
        index: The node number.
        numa_hit: Memory successfully allocated on this node as intended.
        numa_miss: Memory allocated on this node despite the process preferring some other node.
        numa_foreign: Memory intended for this node, but actually allocated on some other node.
        interleave_hit: Interleaved memory successfully allocated on this node as intended.
        local_node: Memory allocated on this node while a process was running on it.
        other_node: Memory allocated on this node while a process was running on some other node.
        memtotal: Total memory of the node in KiB.
        memused: Used memory of the node in KiB.
    """

    index: int
    numa_hit: int = 0
    numa_miss: int = 0
    numa_foreign: int = 0
    interleave_hit: int = 0
    local_node: int = 0
    other_node: int = 0
    memtotal: int = 0
    memused: int = 0

class CPURecord:
    """
    A CPU and its properties.

    Properties are kept in the insertion order. Multiple properties with the same name are allowed.

    Attributes:
        index: The CPU number.
        node: Index of the CPU's node in the node registry, 'None' if the CPU is not assigned to a
              node.
        irqs: Running count of interrupts handled by the CPU.
        props: The list of CPU properties.
    """

    def __init__(self, index: int):
        """
        Initialize a class instance.

        Args:
            index: The CPU number.
        """

        self.index = index
        self.node: int | None = None
        self.irqs = 0
        self.props: list[PropertyType] = []

    def add_prop(self, key: str, value: str | int):
        """
        Append a property.

        Args:
            key: The property name.
            value: The property value. Integers are stored as decimal strings.
        """

        if isinstance(value, int):
            value = str(value)

        _LOG.debug("new prop %s = %s", key, value)
        self.props.append(PropertyType(key, value))

    def get_props(self, key: str) -> Iterator[str]:
        """
        Yield values of all properties named 'key', in the insertion order.

        Args:
            key: The property name.

        Yields:
            The property values.
        """

        for prop in self.props:
            if prop.key == key:
                yield prop.value

    def __repr__(self) -> str:
        """Return a string representation of the CPU record."""

        return f"CPURecord(index={self.index}, node={self.node}, props={len(self.props)})"
