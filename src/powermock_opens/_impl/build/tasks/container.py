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
Lazily created tasks of a project.

A task is registered with its type and an optional configuration action but is only
instantiated ("realized") when it is looked up or iterated over. Actions added
with `TaskCollection.configure_each` run for every matching task exactly once, right after
it is realized, whether the task was registered before or after the action was added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Iterator, List, Optional, Tuple, Type

from ...support.logging import abort, logvv
from .task import Task

if TYPE_CHECKING:
    from ..project import Project

__all__ = ["TaskContainer", "TaskCollection", "TaskProvider"]

TaskAction = Callable[[Task], None]


class TaskProvider(object):
    """A reference to a registered task that realizes it on `get`."""

    def __init__(self, container: TaskContainer, name: str):
        self._container = container
        self.name = name

    def get(self) -> Task:
        return self._container.named(self.name)


class TaskCollection(object):
    """The tasks of a container that are instances of a given type."""

    def __init__(self, container: TaskContainer, task_type: Type[Task]):
        self._container = container
        self.task_type = task_type

    def configure_each(self, action: TaskAction) -> None:
        self._container._add_rule(self.task_type, action)

    def __iter__(self) -> Iterator[Task]:
        return (t for t in self._container if isinstance(t, self.task_type))


class TaskContainer(object):

    def __init__(self, project: Project):
        self.project = project
        self._registered: Dict[str, Tuple[Type[Task], Optional[TaskAction], dict]] = {}
        self._realized: Dict[str, Task] = {}
        self._rules: List[Tuple[Type[Task], TaskAction]] = []

    def register(self, name: str, task_type: Type[Task], configure: Optional[TaskAction] = None, **kwargs) -> TaskProvider:
        """
        Registers a task without creating it. `kwargs` are passed to the constructor of `task_type`.
        """
        if name in self._registered:
            abort(f"Task {name} is already registered", context=self.project)
        self._registered[name] = (task_type, configure, kwargs)
        return TaskProvider(self, name)

    def names(self) -> List[str]:
        return list(self._registered)

    def named(self, name: str) -> Task:
        task = self._realized.get(name)
        if task is None:
            if name not in self._registered:
                abort(f"Task {name} not found", context=self.project)
            task = self._realize(name)
        return task

    def with_type(self, task_type: Type[Task]) -> TaskCollection:
        return TaskCollection(self, task_type)

    def __iter__(self) -> Iterator[Task]:
        for name in list(self._registered):
            yield self.named(name)

    def _realize(self, name: str) -> Task:
        task_type, configure, kwargs = self._registered[name]
        task = task_type(name, self.project, **kwargs)
        self._realized[name] = task
        logvv(f"Realized {task}")
        if configure is not None:
            configure(task)
        for rule_type, action in list(self._rules):
            if isinstance(task, rule_type):
                action(task)
        return task

    def _add_rule(self, task_type: Type[Task], action: TaskAction) -> None:
        self._rules.append((task_type, action))
        for task in list(self._realized.values()):
            if isinstance(task, task_type):
                action(task)
