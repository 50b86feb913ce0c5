# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Provide read-only access to the sysfs and procfs files of the local host.

All paths are absolute paths of the target host, e.g., '/proc/stat'. They are resolved against the
root directory, which is '/' by default. A different root directory is used for reading a dataset
- a copy of the interesting sysfs and procfs files captured on another host or generated by tests.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path
from cpupropslibs.helperlibs import Logging, ClassHelpers
from cpupropslibs.helperlibs.Exceptions import Error, ErrorNotFound, ErrorPermissionDenied

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops.{__name__}")

class SysReader(ClassHelpers.SimpleCloseContext):
    """
    Provide read-only access to the sysfs and procfs files.

    Public methods overview.
        * 'read_file()' - read a file, raise an exception on failure.
        * 'get_file()' - read a file, return an empty string on failure.
        * 'exists()' - check if a path exists.
    """

    def __init__(self, root: str | Path = "/"):
        """
        Initialize a class instance.

        Args:
            root: The root directory to resolve the paths against.
        """

        self.root = Path(root)
        self.hostmsg = ""

        if str(self.root) != "/":
            if not self.root.is_dir():
                raise ErrorNotFound(f"Dataset directory '{self.root}' does not exist",
                                    path=self.root)
            self.hostmsg = f" in dataset '{self.root}'"

    def _resolve(self, path: str | Path) -> Path:
        """
        Resolve target host path 'path' against the root directory.

        Args:
            path: The target host path to resolve.

        Returns:
            The path to use for accessing the file.
        """

        path = Path(path)
        if path.is_absolute():
            path = path.relative_to("/")
        return self.root / path

    def read_file(self, path: str | Path) -> str:
        """
        Read a file.

        Args:
            path: The path to the file to read.

        Returns:
            The contents of the file as a string.

        Raises:
            ErrorNotFound: If the file does not exist.
            ErrorPermissionDenied: If the file cannot be read because of insufficient permissions.
        """

        rpath = self._resolve(path)

        try:
            with open(rpath, "r", encoding="utf-8", errors="replace") as fobj:
                return fobj.read()
        except FileNotFoundError:
            raise ErrorNotFound(f"File '{path}' does not exist{self.hostmsg}",
                                path=Path(path)) from None
        except PermissionError:
            raise ErrorPermissionDenied(f"No permissions to read file '{path}'"
                                        f"{self.hostmsg}") from None
        except OSError as err:
            msg = Error(str(err)).indent(2)
            raise Error(f"Failed to read file '{path}'{self.hostmsg}:\n{msg}") from None

    def get_file(self, path: str | Path) -> str:
        """
        Read a file, and return an empty string if it cannot be read.

        Args:
            path: The path to the file to read.

        Returns:
            The contents of the file as a string, or an empty string if the file does not exist or
            cannot be read.
        """

        try:
            return self.read_file(path)
        except Error as err:
            _LOG.debug("%s", err)
            return ""

    def exists(self, path: str | Path) -> bool:
        """
        Check if a path exists.

        Args:
            path: The path to check.

        Returns:
            True if the path exists, False otherwise.
        """

        try:
            return self._resolve(path).exists()
        except OSError as err:
            msg = Error(str(err)).indent(2)
            raise Error(f"Failed to check if '{path}' exists{self.hostmsg}:\n{msg}") from None
