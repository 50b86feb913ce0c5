# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
cpuprops - print per-CPU properties collected from Linux sysfs and procfs.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import typing
import argcomplete
from cpupropslibs import CPUProps
from cpupropslibs.CPUPropsTypes import QueryConfigType
from cpupropslibs.helperlibs import ArgParse, Logging, Trivial
from cpupropslibs.helperlibs.SysReader import SysReader
from cpupropslibs.helperlibs.Exceptions import Error
from cpupropstool._CPUPropsPrinter import CPUPropsPrinter

if typing.TYPE_CHECKING:
    import argparse
    from typing import Final
    from cpupropslibs.helperlibs.ArgParse import ArgTypedDict

_VERSION = "1.0.3"
TOOLNAME = "cpuprops"

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cpuprops").configure(prefix=TOOLNAME)

_OPTIONS: Final[tuple[ArgTypedDict, ...]] = (
    {
        "short": "-a",
        "long": "--all",
        "argcomplete": None,
        "kwargs": {
            "dest": "listall",
            "action": "store_true",
            "help": """Print all properties of the CPUs in the '<key>=<value>' format. Ignored if
                       property names are specified.""",
        },
    },
    {
        "short": "-w",
        "long": "--nowhite",
        "argcomplete": None,
        "kwargs": {
            "dest": "nowhite",
            "action": "store_true",
            "help": """Replace white-space characters in property values with '_'.""",
        },
    },
    {
        "short": "-p",
        "long": "--prefix",
        "argcomplete": None,
        "kwargs": {
            "dest": "prefix",
            "default": "",
            "metavar": "S",
            "help": """Prepend string S to every printed property value.""",
        },
    },
    {
        "short": "-s",
        "long": "--suffix",
        "argcomplete": None,
        "kwargs": {
            "dest": "suffix",
            "default": "",
            "metavar": "S",
            "help": """Append string S to every printed property value.""",
        },
    },
    {
        "short": "-n",
        "long": "--cpu",
        "argcomplete": None,
        "kwargs": {
            "dest": "cpu",
            "metavar": "CPU",
            "help": """Print properties of CPU number CPU only. The CPU number is not printed in
                       this case. By default, properties of all CPUs are printed, and every line
                       starts with the '<CPU>:' prefix.""",
        },
    },
    {
        "short": "-D",
        "long": "--dataset",
        "argcomplete": "DirectoriesCompleter",
        "kwargs": {
            "dest": "dataset",
            "metavar": "PATH",
            "help": """This option is for debugging and testing. Read sysfs and procfs files from
                       directory PATH instead of '/'. The directory should contain a copy of the
                       'sys' and 'proc' files of a host.""",
        },
    },
    {
        "short": None,
        "long": "--yaml",
        "argcomplete": None,
        "kwargs": {
            "action": "store_true",
            "help": """Print the properties in YAML format.""",
        },
    },
)

def build_arguments_parser() -> ArgParse.ArgsParser:
    """
    Build and return the command-line arguments parser.

    Returns:
        An initialized command-line arguments parser object.
    """

    text = f"""{TOOLNAME} version {_VERSION} - print per-CPU properties, such as NUMA node, CPU
               frequency, cache sizes, interrupt counts, and CPU time statistics. Without
               arguments, print CPU numbers."""
    parser = ArgParse.ArgsParser(description=text, prog=TOOLNAME, ver=_VERSION)

    ArgParse.add_options(parser, _OPTIONS)

    text = """Names of the properties to print (e.g., 'cur_freq' or 'model_name'). If more than one
              name is specified, property values are printed in the '<key>=<value>' format."""
    parser.add_argument("keys", nargs="*", metavar="KEY", help=text)

    parser.set_defaults(func=cpuprops_command)

    argcomplete.autocomplete(parser)

    return parser

def parse_arguments() -> argparse.Namespace:
    """
    Parse the command-line arguments.

    Returns:
        argparse.Namespace: The parsed arguments.
    """

    parser = build_arguments_parser()
    # Property names may be mixed with options, e.g., "cur_freq -n 1 max_freq".
    args = parser.parse_intermixed_args()

    return args

def get_query_config(args: argparse.Namespace) -> QueryConfigType:
    """
    Build the query configuration from the command-line arguments.

    Args:
        args: The parsed command-line arguments.

    Returns:
        The query configuration.
    """

    cpu = None
    if args.cpu is not None:
        cpu = Trivial.str_to_int(args.cpu, base=10, what="CPU number")
        if cpu < 0:
            raise Error(f"Bad CPU number '{args.cpu}': should be a non-negative integer")

    keys = tuple(args.keys) if args.keys else ()
    return QueryConfigType(keys=keys, listall=args.listall, nowhite=args.nowhite,
                           prefix=args.prefix, suffix=args.suffix, cpu=cpu, yaml=args.yaml)

def cpuprops_command(args: argparse.Namespace):
    """
    Implement the 'cpuprops' command.

    Args:
        args: The parsed command-line arguments.
    """

    config = get_query_config(args)

    root = args.dataset
    if not root:
        root = "/"

    with SysReader(root) as reader, \
         CPUProps.CPUProps(reader=reader) as cpuprops, \
         CPUPropsPrinter(config) as printer:
        cpus = cpuprops.collect()

        if config.cpu is not None and config.cpu not in [cpu.index for cpu in cpus]:
            _LOG.notice("CPU %d does not exist%s", config.cpu, reader.hostmsg)

        printer.print_props(cpus)

def main() -> int:
    """
    The entry point of the tool.

    Returns:
        The program exit code.
    """

    try:
        args = parse_arguments()
        args.func(args)
    except KeyboardInterrupt:
        _LOG.info("\nInterrupted, exiting")
        return -1
    except Error as err:
        _LOG.error_out(err)

    return 0

if __name__ == "__main__":
    sys.exit(main())
