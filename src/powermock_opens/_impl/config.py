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
#
"""
Sources for the list of modules whose packages are opened.

The list is a plain text file with one module name per line. Blank lines and lines
starting with ``#`` are ignored.
"""

from __future__ import annotations

__all__ = [
    "CONFIG_RESOURCE",
    "FileSource",
    "ModuleListSource",
    "PackagedResourceSource",
    "StaticSource",
    "load_config",
    "parse_module_list",
]

from abc import ABCMeta, abstractmethod
from importlib import resources
from os.path import exists
from typing import Iterable, List, Optional, Sequence

from .support.logging import logv

CONFIG_RESOURCE = "powermock-open-modules.txt"


def parse_module_list(lines: Iterable[str]) -> List[str]:
    """
    Gets the module names in `lines` in order, without blank lines, comments and duplicates.
    """
    modules = {}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        modules.setdefault(line)
    return list(modules)


class ModuleListSource(object, metaclass=ABCMeta):
    """A place the module list is read from."""

    @abstractmethod
    def read_lines(self) -> Optional[List[str]]:
        """
        Gets the raw lines of the module list or None if the source does not exist.
        """

    def __abort_context__(self) -> str:
        return str(self)


class PackagedResourceSource(ModuleListSource):
    """The module list bundled as a resource of a Python package."""

    def __init__(self, package: str = "powermock_opens", resource: str = CONFIG_RESOURCE):
        self.package = package
        self.resource = resource

    def read_lines(self) -> Optional[List[str]]:
        try:
            traversable = resources.files(self.package).joinpath(self.resource)
        except ModuleNotFoundError:
            return None
        if not traversable.is_file():
            return None
        return traversable.read_text(encoding="utf-8").splitlines()

    def __str__(self) -> str:
        return f"resource {self.resource} of package {self.package}"


class FileSource(ModuleListSource):
    """A module list in an explicit file."""

    def __init__(self, path: str):
        self.path = path

    def read_lines(self) -> Optional[List[str]]:
        if not exists(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as fp:
            return fp.read().splitlines()

    def __str__(self) -> str:
        return self.path


class StaticSource(ModuleListSource):
    """A module list given in memory."""

    def __init__(self, lines: Sequence[str]):
        self.lines = list(lines)

    def read_lines(self) -> Optional[List[str]]:
        return list(self.lines)

    def __str__(self) -> str:
        return f"<{len(self.lines)} lines>"


def load_config(source: Optional[ModuleListSource] = None) -> List[str]:
    """
    Loads the module names from `source`, the bundled module list by default.
    A missing source gives an empty list.
    """
    if source is None:
        source = PackagedResourceSource()
    lines = source.read_lines()
    if lines is None:
        logv(f"Module list {source} not found, no modules will be opened")
        return []
    modules = parse_module_list(lines)
    logv(f"Loaded {len(modules)} modules from {source}")
    return modules
