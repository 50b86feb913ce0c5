# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Provide API for printing CPU properties.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import typing
from cpupropslibs import Query
from cpupropslibs.helperlibs import Logging, ClassHelpers, YAML

if typing.TYPE_CHECKING:
    from typing import IO, Any, Iterable
    from cpupropslibs.CPUPropsTypes import CPURecord, QueryConfigType, SelectedPropType

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

# Characters replaced with '_' in the "no white-spaces" mode.
_WHITESPACE_TRANS: dict[int, str] = str.maketrans({" ": "_", "\t": "_", "\n": "_", "\r": "_"})

class CPUPropsPrinter(ClassHelpers.SimpleCloseContext):
    """
    Print CPU properties selected by a query.

    Public methods overview.
        * 'print_props()' - select and print CPU properties.
        * 'format_value()' - format a property value.
    """

    def __init__(self, config: QueryConfigType, fobj: IO[str] | None = None):
        """
        Initialize a class instance.

        Args:
            config: The query and output configuration.
            fobj: The file object to print to. Print using the tool logger (standard output) by
                  default.
        """

        self._config = config
        self._fobj = fobj
        self._mode = Query.get_mode(config)

    def close(self):
        """Uninitialize the class object."""
        ClassHelpers.close(self, unref_attrs=("_fobj",))

    def _print(self, msg: str):
        """Print message 'msg'."""

        if self._fobj:
            self._fobj.write(msg + "\n")
        else:
            _LOG.info(msg)

    def _yaml_dump(self, info: dict[Any, Any]):
        """Dump dictionary 'info' in YAML format."""

        fobj = self._fobj
        if not fobj:
            fobj = sys.stdout

        YAML.dump(info, fobj)

    def format_value(self, value: str) -> str:
        """
        Format a property value according to the output configuration.

        Args:
            value: The property value to format.

        Returns:
            The value with white-space characters replaced (in the "no white-spaces" mode), and
            with the prefix and suffix added.
        """

        if self._config.nowhite:
            value = value.translate(_WHITESPACE_TRANS)

        return f"{self._config.prefix}{value}{self._config.suffix}"

    def _format_line(self, sprop: SelectedPropType) -> str:
        """
        Format a selected property as an output line.

        Args:
            sprop: The selected property to format.

        Returns:
            The formatted line.
        """

        if self._mode == "cpus":
            return str(sprop.cpu)

        assert sprop.value is not None

        line = ""
        if self._config.cpu is None:
            line += f"{sprop.cpu}:"

        if self._mode == "all" or len(self._config.keys) > 1:
            line += f"{sprop.key}="

        return line + self.format_value(sprop.value)

    def _print_yaml(self, sprops: Iterable[SelectedPropType]) -> int:
        """
        Print selected properties in YAML format.

        Args:
            sprops: The selected properties.

        Returns:
            The number of printed properties or CPU numbers.
        """

        if self._mode == "cpus":
            cpus = [sprop.cpu for sprop in sprops]
            if cpus:
                self._yaml_dump({"CPUs": cpus})
            return len(cpus)

        yaml_info: dict[int, dict[str, Any]] = {}
        printed = 0

        for sprop in sprops:
            assert sprop.key is not None and sprop.value is not None

            cpu_info = yaml_info.setdefault(sprop.cpu, {})
            value = self.format_value(sprop.value)

            if sprop.key not in cpu_info:
                cpu_info[sprop.key] = value
            elif isinstance(cpu_info[sprop.key], list):
                cpu_info[sprop.key].append(value)
            else:
                # The CPU has multiple properties with this name, turn the value into a list.
                cpu_info[sprop.key] = [cpu_info[sprop.key], value]

            printed += 1

        if yaml_info:
            self._yaml_dump(yaml_info)
        return printed

    def print_props(self, cpus: Iterable[CPURecord]) -> int:
        """
        Select and print CPU properties.

        Args:
            cpus: The CPU records to select properties from.

        Returns:
            The number of printed properties, or CPU numbers in the CPU numbers listing mode.
        """

        sprops = Query.select(cpus, self._config)

        if self._config.yaml:
            return self._print_yaml(sprops)

        printed = 0
        for sprop in sprops:
            self._print(self._format_line(sprop))
            printed += 1

        return printed
