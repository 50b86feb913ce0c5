# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""Test NUMA node and CPU discovery, and CPU to node assignment."""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path
import pytest
import common
from cpupropslibs import _Discovery, _Nodes, _CPUs
from cpupropslibs.helperlibs.SysReader import SysReader
from cpupropslibs.helperlibs.Exceptions import Error

def test_scanners():
    """Test the contiguous and the bounded discovery strategies."""

    existing = {0, 1, 3}

    assert list(_Discovery.scan_contiguous(existing.__contains__)) == [0, 1]
    assert list(_Discovery.scan_contiguous(lambda _: False)) == []

    scanner = _Discovery.get_bounded_scanner(8)
    assert list(scanner(existing.__contains__)) == [0, 1, 3]
    assert list(_Discovery.get_bounded_scanner(0)(existing.__contains__)) == []

    with pytest.raises(Error):
        _Discovery.get_bounded_scanner(-1)

def test_parse_numastat():
    """Test parsing node 'numastat' files."""

    text = "numa_miss 5\nnuma_hit 7\nbogus 3\nlocal_node\nother_node 2\nnuma_hit 9\n"
    assert _Nodes.parse_numastat(text) == {"numa_miss": 5, "numa_hit": 7, "other_node": 2}
    assert _Nodes.parse_numastat("") == {}

def test_parse_meminfo():
    """Test parsing node 'meminfo' files."""

    text = "Node 0 MemTotal:       100 kB\nNode 0 MemFree:   80 kB\nNode 0 MemUsed:  20 kB\n"
    assert _Nodes.parse_meminfo(text) == {"memtotal": 100, "memused": 20}
    assert _Nodes.parse_meminfo("garbage\n") == {}

def test_discover_nodes(dataset: Path):
    """Test node discovery and node statistics."""

    with SysReader(dataset) as reader:
        nodes = _Nodes.discover_nodes(reader)

    assert [node.index for node in nodes] == [0, 1]
    assert nodes[1].numa_hit == 1001
    assert nodes[1].numa_miss == 1
    assert nodes[1].numa_foreign == 0
    assert nodes[1].interleave_hit == 50
    assert nodes[1].local_node == 901
    assert nodes[1].other_node == 100
    assert nodes[1].memtotal == 16303448
    assert nodes[1].memused == 1000001

def test_discover_nodes_gap(tmp_path: Path):
    """Test that node discovery stops at the first missing node by default."""

    for node in (0, 1, 3):
        common.add_node(tmp_path, node)

    with SysReader(tmp_path) as reader:
        assert [node.index for node in _Nodes.discover_nodes(reader)] == [0, 1]

        scanner = _Discovery.get_bounded_scanner(8)
        nodes = _Nodes.discover_nodes(reader, scanner=scanner)
        assert [node.index for node in nodes] == [0, 1, 3]

def test_discover_nodes_partial(tmp_path: Path):
    """Test nodes with empty 'numastat' and missing 'meminfo' files."""

    common.add_node(tmp_path, 0)
    common.write_file(tmp_path, "/sys/devices/system/node/node1/numastat", "numa_hit 5\n")
    common.write_file(tmp_path, "/sys/devices/system/node/node2/numastat", "")
    common.add_node(tmp_path, 3)

    with SysReader(tmp_path) as reader:
        nodes = _Nodes.discover_nodes(reader)

    # An empty 'numastat' file means that the node does not exist.
    assert [node.index for node in nodes] == [0, 1]
    # Missing fields and a missing 'meminfo' file result in zeroes.
    assert nodes[1].numa_hit == 5
    assert nodes[1].numa_miss == 0
    assert nodes[1].memtotal == 0
    assert nodes[1].memused == 0

def test_discover_no_nodes(tmp_path: Path):
    """Test discovery on a system without NUMA nodes information."""

    with SysReader(tmp_path) as reader:
        assert _Nodes.discover_nodes(reader) == []
        assert _CPUs.discover_cpus(reader) == []

def test_discover_cpus_gap(tmp_path: Path):
    """Test that CPU discovery stops at the first missing CPU by default."""

    for cpu in (0, 1, 3):
        common.make_dir(tmp_path, f"/sys/devices/system/cpu/cpu{cpu}")

    with SysReader(tmp_path) as reader:
        cpus = _CPUs.discover_cpus(reader)
        assert [cpu.index for cpu in cpus] == [0, 1]
        assert all(cpu.node is None and not cpu.props and cpu.irqs == 0 for cpu in cpus)

        cpus = _CPUs.discover_cpus(reader, scanner=_Discovery.get_bounded_scanner(8))
        assert [cpu.index for cpu in cpus] == [0, 1, 3]

def test_assign_nodes(tmp_path: Path):
    """Test the default CPU to node assignment strategy."""

    for node in (0, 1):
        common.add_node(tmp_path, node)

    cpu_base = "/sys/devices/system/cpu"
    common.make_dir(tmp_path, f"{cpu_base}/cpu0/node1")
    # CPU 1 has links for both nodes, the first node wins.
    common.make_dir(tmp_path, f"{cpu_base}/cpu1/node0")
    common.make_dir(tmp_path, f"{cpu_base}/cpu1/node1")
    # CPU 2 has no node links, CPU 3 links a node that was not discovered.
    common.make_dir(tmp_path, f"{cpu_base}/cpu2")
    common.make_dir(tmp_path, f"{cpu_base}/cpu3/node7")

    with SysReader(tmp_path) as reader:
        nodes = _Nodes.discover_nodes(reader)
        cpus = _CPUs.discover_cpus(reader)
        _CPUs.assign_nodes(cpus, nodes, _CPUs.first_node_assigner(reader))

    assert [cpu.node for cpu in cpus] == [1, 0, None, None]

def test_assign_nodes_position(tmp_path: Path):
    """Test that the CPU 'node' attribute refers to the position in the node registry."""

    for node in (0, 2):
        common.add_node(tmp_path, node)
    common.make_dir(tmp_path, "/sys/devices/system/cpu/cpu0/node2")

    with SysReader(tmp_path) as reader:
        nodes = _Nodes.discover_nodes(reader, scanner=_Discovery.get_bounded_scanner(4))
        cpus = _CPUs.discover_cpus(reader)
        _CPUs.assign_nodes(cpus, nodes, _CPUs.first_node_assigner(reader))

    assert cpus[0].node == 1
    assert nodes[cpus[0].node].index == 2

def test_assign_nodes_custom(tmp_path: Path):
    """Test custom node assignment strategies."""

    common.build_dataset(tmp_path)

    with SysReader(tmp_path) as reader:
        nodes = _Nodes.discover_nodes(reader)
        cpus = _CPUs.discover_cpus(reader)

    def _last_node(_, node_indices):
        """Assign all CPUs to the last node."""
        return list(node_indices)[-1]

    _CPUs.assign_nodes(cpus, nodes, _last_node)
    assert [cpu.node for cpu in cpus] == [1, 1, 1, 1]

    with pytest.raises(Error):
        _CPUs.assign_nodes(cpus, nodes, lambda _cpu, _nodes: 5)
