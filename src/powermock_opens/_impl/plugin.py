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

__all__ = ["PowermockOpens", "PowermockOpensPlugin"]

from typing import List, Optional

from . import opens
from .build.project import JavaPlugin, Plugin, Project
from .build.tasks.task import TestTask
from .config import ModuleListSource, load_config
from .jdk import get_java_home
from .support.logging import logv


class PowermockOpens(object):
    """The generated argument file as it is passed to a JVM."""

    def __init__(self, arg_file: str):
        self.arg_file = arg_file

    def get_jvm_args(self) -> List[str]:
        return [opens.argument_file_reference(self.arg_file)]

    def __str__(self) -> str:
        return self.arg_file


class PowermockOpensPlugin(Plugin):
    """
    Opens the packages of the configured JDK modules to the unnamed module for every test
    task of a Java project.

    The argument file is generated when the plugin is applied. It is attached to the test
    tasks once the project has the Java capability, which may be applied before or after
    this plugin.
    """

    def __init__(self, config_source: Optional[ModuleListSource] = None, java_home: Optional[str] = None):
        """
        :param config_source: where the module list is read from, the bundled list by default
        :param java_home: the JDK whose jmod files are scanned, see `get_java_home` by default
        """
        self.config_source = config_source
        self.java_home = java_home
        self.powermock_opens: Optional[PowermockOpens] = None

    def apply(self, project: Project) -> None:
        modules = load_config(self.config_source)
        java_home = get_java_home(self.java_home)
        arg_file = opens.default_argument_file(project.root_project.project_dir)
        opens.generate(modules, java_home, arg_file)
        powermock_opens = PowermockOpens(arg_file)
        self.powermock_opens = powermock_opens

        def _add_jvm_args(task: TestTask) -> None:
            logv(f"Adding {powermock_opens.get_jvm_args()} to {task}")
            task.jvm_args(powermock_opens.get_jvm_args())

        def _wire_test_tasks(_: JavaPlugin) -> None:
            project.tasks.with_type(TestTask).configure_each(_add_jvm_args)

        project.plugins.with_type(JavaPlugin, _wire_test_tasks)
