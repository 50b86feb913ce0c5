# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Provide YAML output capabilities.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path
from typing import Any, IO
import yaml
from cpupropslibs.helperlibs import Logging
from cpupropslibs.helperlibs.Exceptions import Error

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

def dump(data: dict[Any, Any], path: Path | IO[str]):
    """
    Dump a dictionary to a YAML file.

    Args:
        data: The dictionary to dump.
        path: The file path or file object to write the YAML data to.
    """

    try:
        if hasattr(path, "write"):
            yaml.safe_dump(data, path, default_flow_style=False, sort_keys=False)
            _LOG.debug("wrote YAML data to '%s'", getattr(path, "name", path))
        else:
            with open(path, "w", encoding="utf-8") as fobj:
                yaml.safe_dump(data, fobj, default_flow_style=False, sort_keys=False)
            _LOG.debug("wrote YAML file at '%s'", path)
    except OSError as err:
        msg = Error(str(err)).indent(2)
        raise Error(f"failed to write YAML file '{path}':\n{msg}") from err
