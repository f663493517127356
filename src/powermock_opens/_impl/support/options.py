#
# ----------------------------------------------------------------------------------------------------
#
# Copyright (c) 2024, 2024, Oracle and/or its affiliates. All rights reserved.
# DO NOT ALTER OR REMOVE COPYRIGHT NOTICES OR THIS FILE HEADER.
#
# This code is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License version 2 only, as
# published by the Free Software Foundation.
#
# This code is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# version 2 for more details (a copy is included in the LICENSE file that
# accompanied this code).
#
# You should have received a copy of the GNU General Public License version
# 2 along with this work; if not, write to the Free Software Foundation,
# Inc., 51 Franklin St, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Please contact Oracle, 500 Oracle Parkway, Redwood Shores, CA 94065 USA
# or visit www.oracle.com if you need additional information or have any
# questions.
#
# ----------------------------------------------------------------------------------------------------
"""
Global options shared by the logging functions and the command line.

The command line parser fills `_opts` in place. When the package is used as a library
(e.g. from a build script) the defaults below apply.
"""

__all__ = ["get_opts", "set_opts"]

from argparse import Namespace

_defaults = dict(
    verbose=False,
    very_verbose=False,
    warn=True,
    quiet=False,
)

_opts = Namespace(**_defaults)


def get_opts() -> Namespace:
    return _opts


def set_opts(**kwargs) -> Namespace:
    """
    Updates the global options. Options not given keep their current value.
    Passing ``reset=True`` restores the defaults first.
    """
    if kwargs.pop("reset", False):
        vars(_opts).clear()
        vars(_opts).update(_defaults)
    for key, value in kwargs.items():
        setattr(_opts, key, value)
    return _opts
