# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Select CPU properties according to a query configuration.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from cpupropslibs.CPUPropsTypes import SelectedPropType

if typing.TYPE_CHECKING:
    from typing import Iterable, Iterator
    from cpupropslibs.CPUPropsTypes import CPURecord, QueryConfigType, QueryModeType

def get_mode(config: QueryConfigType) -> QueryModeType:
    """
    Return the query mode for a query configuration.

    Args:
        config: The query configuration.

    Returns:
        "keys" if property names were requested, "all" if all properties were requested, and "cpus"
        otherwise. Property names take precedence over all properties.
    """

    if config.keys:
        return "keys"
    if config.listall:
        return "all"
    return "cpus"

def select(cpus: Iterable[CPURecord], config: QueryConfigType) -> Iterator[SelectedPropType]:
    """
    Select CPU properties.

    Args:
        cpus: The CPU records to select from.
        config: The query configuration.

    Yields:
        'SelectedPropType' tuples in CPU order, and then in property insertion order. In the "cpus"
        mode, the 'key' and 'value' fields are 'None'. Nothing is yielded in the "cpus" mode if
        'config.cpu' is set.
    """

    mode = get_mode(config)
    if mode == "cpus" and config.cpu is not None:
        return

    keys = set(config.keys)

    for cpu in cpus:
        if config.cpu is not None and cpu.index != config.cpu:
            continue

        if mode == "cpus":
            yield SelectedPropType(cpu.index, None, None)
            continue

        for prop in cpu.props:
            if mode == "all" or prop.key in keys:
                yield SelectedPropType(cpu.index, prop.key, prop.value)
