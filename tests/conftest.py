#!/usr/bin/env python
#
# Copyright (C) 2022-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Author: Antti Laakso <antti.laakso@linux.intel.com>
#         Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""This configuration file provides the synthetic dataset fixtures for the tests."""

from pathlib import Path
import pytest
import common
from cpupropslibs.helperlibs.SysReader import SysReader

@pytest.fixture(name="dataset")
def get_dataset(tmp_path: Path) -> Path:
    """Build the default synthetic dataset and return its root directory path."""

    return common.build_dataset(tmp_path / "dataset")

@pytest.fixture(name="reader")
def get_reader(dataset: Path):
    """Yield a 'SysReader' object for the default synthetic dataset."""

    with SysReader(dataset) as reader:
        yield reader
