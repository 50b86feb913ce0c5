# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""Test the CPU properties printer."""

from  __future__ import annotations # Remove when switching to Python 3.10+.

import io
import yaml
import pytest
from cpupropslibs.CPUPropsTypes import CPURecord, QueryConfigType
from cpupropstool._CPUPropsPrinter import CPUPropsPrinter

@pytest.fixture(name="cpus")
def get_cpus() -> list[CPURecord]:
    """Return CPU records with a few properties."""

    cpu0 = CPURecord(0)
    cpu0.add_prop("freq", 1200)
    cpu0.add_prop("name", "Xeon CPU\t@ 2.10GHz")
    cpu0.add_prop("freq", 1300)

    cpu1 = CPURecord(1)
    cpu1.add_prop("freq", 2400)

    return [cpu0, cpu1]

def _print(cpus: list[CPURecord], **kwargs) -> tuple[int, str]:
    """
    Print CPU properties with the query configuration built from 'kwargs'.

    Returns:
        A tuple of the number of printed items and the printed text.
    """

    fobj = io.StringIO()
    with CPUPropsPrinter(QueryConfigType(**kwargs), fobj=fobj) as printer:
        printed = printer.print_props(cpus)

    return printed, fobj.getvalue()

def test_print_cpus(cpus: list[CPURecord]):
    """Test printing CPU numbers."""

    assert _print(cpus) == (2, "0\n1\n")
    assert _print(cpus, cpu=1) == (0, "")

def test_print_keys(cpus: list[CPURecord]):
    """Test printing properties selected by name."""

    assert _print(cpus, keys=("freq",)) == (3, "0:1200\n0:1300\n1:2400\n")
    assert _print(cpus, keys=("freq",), cpu=0) == (2, "1200\n1300\n")
    assert _print(cpus, keys=("freq",), cpu=5) == (0, "")
    assert _print(cpus, keys=("nonexistent",)) == (0, "")

    # Property names are printed when more than one name is requested.
    assert _print(cpus, keys=("freq", "name"), cpu=0) == \
           (3, "freq=1200\nname=Xeon CPU\t@ 2.10GHz\nfreq=1300\n")
    assert _print(cpus, keys=("freq", "nonexistent")) == \
           (3, "0:freq=1200\n0:freq=1300\n1:freq=2400\n")

def test_print_all(cpus: list[CPURecord]):
    """Test printing all properties."""

    _, text = _print(cpus, listall=True)
    assert text == "0:freq=1200\n0:name=Xeon CPU\t@ 2.10GHz\n0:freq=1300\n1:freq=2400\n"

    assert _print(cpus, listall=True, cpu=1) == (1, "freq=2400\n")

def test_print_format(cpus: list[CPURecord]):
    """Test the value formatting options."""

    _, text = _print(cpus, keys=("name",), cpu=0, nowhite=True)
    assert text == "Xeon_CPU_@_2.10GHz\n"

    _, text = _print(cpus, keys=("freq",), cpu=1, prefix="<", suffix=" MHz>")
    assert text == "<2400 MHz>\n"

    # The prefix and the suffix are not affected by the "no white-spaces" mode.
    _, text = _print(cpus, keys=("name",), cpu=0, nowhite=True, prefix="[ ", suffix=" ]")
    assert text == "[ Xeon_CPU_@_2.10GHz ]\n"

    with CPUPropsPrinter(QueryConfigType(nowhite=True)) as printer:
        assert printer.format_value("a b\tc\rd\ne") == "a_b_c_d_e"

def test_print_yaml(cpus: list[CPURecord]):
    """Test printing in YAML format."""

    printed, text = _print(cpus, yaml=True)
    assert printed == 2
    assert yaml.safe_load(text) == {"CPUs": [0, 1]}

    printed, text = _print(cpus, yaml=True, listall=True)
    assert printed == 4
    assert yaml.safe_load(text) == {0: {"freq": ["1200", "1300"], "name": "Xeon CPU\t@ 2.10GHz"},
                                    1: {"freq": "2400"}}

    printed, text = _print(cpus, yaml=True, keys=("freq",), cpu=1, suffix="MHz")
    assert printed == 1
    assert yaml.safe_load(text) == {1: {"freq": "2400MHz"}}

    assert _print(cpus, yaml=True, keys=("nonexistent",)) == (0, "")
