#!/usr/bin/env python3
#
# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""Common functions for cpuprops tests: build synthetic sysfs and procfs datasets."""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path
import logging
import typing

if typing.TYPE_CHECKING:
    import pytest

# Number of CPUs and nodes in the default dataset. CPUs 0 and 1 belong to node 0, CPUs 2 and 3
# belong to node 1.
NCPUS = 4
NNODES = 2

INTERRUPTS = """           CPU0       CPU1       CPU2       CPU3
  0:         10         20         30         40   IO-APIC   2-edge      timer
  1:          1          2          3          4   IO-APIC   1-edge      i8042
NMI:          0          0          0          0   Non-maskable interrupts
ERR:          5
"""

SOFTNET_STAT = """0000000a 00000000 00000001 00000000 00000000 00000000 00000000 00000000
0000000b 00000000 00000002 00000000 00000000 00000000 00000000 00000000
0000000c 00000000 00000003 00000000 00000000 00000000 00000000 00000000
0000000d 00000000 00000004 00000000 00000000 00000000 00000000 00000000
"""

RT_CACHE = """entries  in_hit   in_slow_tot in_slow_mc in_no_route in_brd
00000010  00000100 00000001 00000000 00000000 00000000
00000010  00000200 00000002 00000000 00000000 00000000
00000010  00000300 00000003 00000000 00000000 00000000
00000010  00000400 00000004 00000000 00000000 00000000
"""

STAT = """cpu  4000 40 400 40000 4 4 4 0 0 0
cpu0 1000 10 100 10000 1 1 1 0 0 0
cpu1 1001 11 101 10001 1 1 1 0 0 0
cpu2 1002 12 102 10002 1 1 1 0 0 0
cpu3 1003 13 103 10003 1 1 1 0 0 0
intr 123456 10 0 0
ctxt 987654
btime 1700000000
"""

MODEL_NAME = "Intel(R) Xeon(R) Gold 6130 CPU @ 2.10GHz"

_CPUINFO_BLOCK = """processor\t: {cpu}
vendor_id\t: GenuineIntel
cpu family\t: 6
model\t\t: 85
model name\t: {model_name}
stepping\t: 4
cpu MHz\t\t: 2100.000
cache size\t: 22528 KB
physical id\t: 0
siblings\t: 4
core id\t\t: {core}
cpu cores\t: 2
flags\t\t: fpu vme de pse tsc msr
"""

_CACHES = (("32K", "Data"), ("32K", "Instruction"), ("1024K", "Unified"), ("22528K", "Unified"))

def write_file(root: Path, path: str, text: str):
    """
    Create a file in a dataset.

    Args:
        root: The dataset root directory.
        path: The target host path of the file, e.g., '/proc/stat'.
        text: The file contents.
    """

    fullpath = root / path.lstrip("/")
    fullpath.parent.mkdir(parents=True, exist_ok=True)
    fullpath.write_text(text, encoding="utf-8")

def make_dir(root: Path, path: str):
    """
    Create a directory in a dataset.

    Args:
        root: The dataset root directory.
        path: The target host path of the directory, e.g., '/sys/devices/system/cpu/cpu0'.
    """

    (root / path.lstrip("/")).mkdir(parents=True, exist_ok=True)

def get_cpuinfo(ncpus: int) -> str:
    """
    Return '/proc/cpuinfo' contents for 'ncpus' CPUs.

    Args:
        ncpus: Number of CPU information blocks.

    Returns:
        The '/proc/cpuinfo' file contents.
    """

    blocks = []
    for cpu in range(ncpus):
        blocks.append(_CPUINFO_BLOCK.format(cpu=cpu, core=cpu // 2, model_name=MODEL_NAME))
    return "\n".join(blocks) + "\n"

def add_node(root: Path, node: int):
    """
    Add NUMA node 'node' sysfs files to a dataset.

    Args:
        root: The dataset root directory.
        node: The node number.
    """

    base = f"/sys/devices/system/node/node{node}"

    write_file(root, f"{base}/numastat", f"numa_hit {1000 + node}\n"
                                         f"numa_miss {node}\n"
                                         f"numa_foreign 0\n"
                                         f"interleave_hit 50\n"
                                         f"local_node {900 + node}\n"
                                         f"other_node 100\n")
    write_file(root, f"{base}/meminfo", f"Node {node} MemTotal:       16303448 kB\n"
                                        f"Node {node} MemFree:        15303448 kB\n"
                                        f"Node {node} MemUsed:         {1000000 + node} kB\n")

def add_cpu(root: Path, cpu: int, node: int | None):
    """
    Add CPU 'cpu' sysfs files to a dataset.

    Args:
        root: The dataset root directory.
        cpu: The CPU number.
        node: The node number the CPU belongs to, 'None' for no node link.
    """

    base = f"/sys/devices/system/cpu/cpu{cpu}"

    make_dir(root, base)
    if node is not None:
        make_dir(root, f"{base}/node{node}")

    write_file(root, f"{base}/cpufreq/cpuinfo_cur_freq", f"{1200000 + cpu}\n")
    write_file(root, f"{base}/cpufreq/cpuinfo_max_freq", "3700000\n")
    write_file(root, f"{base}/cpufreq/scaling_governor", "powersave\n")
    write_file(root, f"{base}/topology/physical_package_id", "0\n")
    write_file(root, f"{base}/topology/core_id", f"{cpu // 2}\n")
    write_file(root, f"{base}/topology/core_siblings_list", "0-3\n")
    first = cpu - cpu % 2
    write_file(root, f"{base}/topology/thread_siblings_list", f"{first}-{first + 1}\n")

    for idx, (size, ctype) in enumerate(_CACHES):
        write_file(root, f"{base}/cache/index{idx}/size", f"{size}\n")
        write_file(root, f"{base}/cache/index{idx}/type", f"{ctype}\n")

def build_dataset(root: Path, ncpus: int = NCPUS, nnodes: int = NNODES,
                  procfs: bool = True) -> Path:
    """
    Build a synthetic sysfs and procfs dataset.

    CPUs are distributed between nodes evenly, in ascending order. For example, with 4 CPUs and 2
    nodes, CPUs 0 and 1 belong to node 0, and CPUs 2 and 3 belong to node 1.

    Args:
        root: The dataset root directory.
        ncpus: Number of CPUs.
        nnodes: Number of NUMA nodes.
        procfs: Add procfs files if 'True', otherwise add only sysfs files.

    Returns:
        The dataset root directory.
    """

    for node in range(nnodes):
        add_node(root, node)

    for cpu in range(ncpus):
        if nnodes:
            node = cpu * nnodes // ncpus
        else:
            node = None
        add_cpu(root, cpu, node)

    if procfs:
        write_file(root, "/proc/interrupts", INTERRUPTS)
        write_file(root, "/proc/cpuinfo", get_cpuinfo(ncpus))
        write_file(root, "/proc/net/softnet_stat", SOFTNET_STAT)
        write_file(root, "/proc/net/stat/rt_cache", RT_CACHE)
        write_file(root, "/proc/stat", STAT)

    return root

def get_output(caplog: pytest.LogCaptureFixture) -> list[str]:
    """
    Return the lines printed by the tool.

    Args:
        caplog: The pytest log capturing fixture.

    Returns:
        The list of printed lines. The tool prints data at the 'INFO' log level.
    """

    return [rec.getMessage() for rec in caplog.records if rec.levelno == logging.INFO]
