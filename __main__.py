#!/usr/bin/python
#
# Copyright (C) 2020-2026 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Author: Antti Laakso <antti.laakso@intel.com>

"""
The main entry point for the 'cpuprops' tool when it is run as a zipapp archive.
"""

import sys
from cpupropstool._CPUProps import main

if __name__ == "__main__":
    sys.exit(main())
