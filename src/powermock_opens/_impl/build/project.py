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

import os
from abc import ABCMeta, abstractmethod
from typing import Callable, Dict, List, Optional, Tuple, Type, TypeVar, Union

from ..support.logging import logv
from .tasks.container import TaskContainer
from .tasks.task import TestTask

__all__ = ["JavaPlugin", "Plugin", "PluginContainer", "Project"]

P = TypeVar("P", bound="Plugin")


class Plugin(object, metaclass=ABCMeta):
    """An extension applied to a project."""

    @abstractmethod
    def apply(self, project: Project) -> None:
        """Applies this plugin to `project`."""


class JavaPlugin(Plugin):
    """
    The Java build capability. Registers the ``test`` task running the tests of the project.
    """

    def apply(self, project: Project) -> None:
        project.tasks.register("test", TestTask)


class PluginContainer(object):
    """The plugins applied to a project, at most one instance per plugin type."""

    def __init__(self, project: Project):
        self.project = project
        self._plugins: Dict[Type[Plugin], Plugin] = {}
        self._actions: List[Tuple[Type[Plugin], Callable[[Plugin], None]]] = []

    def apply(self, plugin: Union[Plugin, Type[Plugin]]) -> Plugin:
        """
        Applies `plugin` (an instance or a type that is instantiated without arguments) unless a
        plugin of the same type is already applied. Actions registered with `with_type` for the
        plugin's type run after the plugin is applied.
        """
        plugin_type = plugin if isinstance(plugin, type) else type(plugin)
        existing = self._plugins.get(plugin_type)
        if existing is not None:
            return existing
        instance = plugin() if isinstance(plugin, type) else plugin
        instance.apply(self.project)
        self._plugins[plugin_type] = instance
        logv(f"Applied {plugin_type.__name__} to {self.project}")
        for action_type, action in list(self._actions):
            if isinstance(instance, action_type):
                action(instance)
        return instance

    def has_plugin(self, plugin_type: Type[Plugin]) -> bool:
        return any(isinstance(p, plugin_type) for p in self._plugins.values())

    def find_plugin(self, plugin_type: Type[P]) -> Optional[P]:
        for p in self._plugins.values():
            if isinstance(p, plugin_type):
                return p
        return None

    def with_type(self, plugin_type: Type[P], action: Callable[[P], None]) -> None:
        """
        Runs `action` for each applied plugin of type `plugin_type`, now for the plugins
        already applied and later for plugins applied afterwards.
        """
        self._actions.append((plugin_type, action))
        for p in list(self._plugins.values()):
            if isinstance(p, plugin_type):
                action(p)


class Project(object):
    """
    A unit of a build. Projects form a tree; the root project's directory is the build root.
    """

    def __init__(self, name: str, project_dir: str, parent: Optional[Project] = None):
        self.name = name
        self.project_dir = os.path.abspath(project_dir)
        self.parent = parent
        self.children: List[Project] = []
        if parent is not None:
            parent.children.append(self)
        self.plugins = PluginContainer(self)
        self.tasks = TaskContainer(self)

    @property
    def root_project(self) -> Project:
        p = self
        while p.parent is not None:
            p = p.parent
        return p

    @property
    def path(self) -> str:
        if self.parent is None:
            return ":"
        if self.parent.parent is None:
            return ":" + self.name
        return self.parent.path + ":" + self.name

    def apply(self, plugin: Union[Plugin, Type[Plugin]]) -> Plugin:
        return self.plugins.apply(plugin)

    def __str__(self) -> str:
        return f"project '{self.path}'"

    def __abort_context__(self) -> str:
        return str(self)
