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
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from ...support.system import exe_suffix

if TYPE_CHECKING:
    from ..project import Project

__all__ = ["Task", "TestTask"]


class Task(object):
    """A task registered with a project."""

    name: str
    project: Project

    def __init__(self, name: str, project: Project):
        """
        :param name: the name of the task, unique within `project`
        :param project: the project owning this task
        """
        self.name = name
        self.project = project

    def __str__(self) -> str:
        if self.project.path == ":":
            return ":" + self.name
        return self.project.path + ":" + self.name

    def __repr__(self) -> str:
        return str(self)

    def __abort_context__(self) -> str:
        return "task " + str(self)


class TestTask(Task):
    """
    Describes the forked JVM running the tests of a project.

    JVM arguments are collected in order and placed in front of the main class on the command line.
    """

    # not a pytest test class
    __test__ = False

    main_class: Optional[str]
    test_args: List[str]

    def __init__(self, name: str, project: Project, main_class: Optional[str] = None, java_exe: Optional[str] = None):
        super(TestTask, self).__init__(name, project)
        self.main_class = main_class
        self.java_exe = java_exe or exe_suffix("java")
        self.test_args = []
        self._jvm_args: List[str] = []

    def jvm_args(self, args: Sequence[str]) -> None:
        """Appends `args` to the JVM arguments of this task."""
        self._jvm_args.extend(args)

    @property
    def all_jvm_args(self) -> List[str]:
        return list(self._jvm_args)

    def command_line(self) -> List[str]:
        main = [self.main_class] if self.main_class else []
        return [self.java_exe] + self._jvm_args + main + self.test_args
