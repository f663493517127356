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
Derives ``--add-opens`` launcher arguments from the ``.jmod`` files of a JDK.

A jmod file is a zip archive (preceded by a 4 byte ``JM`` header) whose class files live
under ``classes/``. Every named package found there for a configured module is opened to
the unnamed module so that PowerMock and similar libraries can reflect on JDK internals.
"""

from __future__ import annotations

__all__ = [
    "ARGFILE_NAME",
    "ARGFILE_DIR",
    "argument_file_reference",
    "collect_opens",
    "default_argument_file",
    "generate",
    "jmods_dir",
    "module_packages",
    "opens_directive",
    "package_of",
    "write_argument_file",
]

import os
import zipfile
from os.path import exists, isdir, join
from typing import Dict, Iterable, List, Optional

from .support import java_argument_file
from .support.logging import abort, logv, logvv, warn
from .util import SafeFileCreation

ARGFILE_DIR = "gbuild"
ARGFILE_NAME = "powermock-open-modules.argfile"

_CLASSES_PREFIX = "classes/"
_CLASS_SUFFIX = ".class"


def jmods_dir(runtime_home: Optional[str]) -> Optional[str]:
    if not runtime_home:
        return None
    return join(runtime_home, "jmods")


def default_argument_file(root_dir: str) -> str:
    """
    Gets the location of the argument file for the build rooted at `root_dir`.
    """
    return join(root_dir, ARGFILE_DIR, ARGFILE_NAME)


def package_of(entry_name: str) -> Optional[str]:
    """
    Gets the package of a class file entry in a jmod file or None if `entry_name` is not
    a class file or the class is in the unnamed package.

    >>> package_of('classes/java/util/concurrent/Bar.class')
    'java.util.concurrent'
    """
    if not entry_name.startswith(_CLASSES_PREFIX) or not entry_name.endswith(_CLASS_SUFFIX):
        return None
    class_path = entry_name[len(_CLASSES_PREFIX):]
    last_slash = class_path.rfind("/")
    if last_slash <= 0:
        return None
    return class_path[:last_slash].replace("/", ".")


def opens_directive(module: str, package: str) -> str:
    return f"--add-opens={module}/{package}=ALL-UNNAMED"


def module_packages(module: str, jmod_path: str) -> List[str]:
    """
    Gets the packages containing classes in the jmod file `jmod_path`, in entry order.
    Aborts if the file is not a readable zip archive.
    """
    packages: Dict[str, None] = {}
    try:
        with zipfile.ZipFile(jmod_path, "r") as zf:
            for name in zf.namelist():
                package = package_of(name)
                if package is not None:
                    packages.setdefault(package)
    # ValueError covers undecodable entry names
    except (zipfile.BadZipFile, OSError, ValueError) as e:
        abort(f"Error reading module archive {jmod_path}: {e}", context=f"module {module}")
    logvv(f"{module}: {len(packages)} packages in {jmod_path}")
    return list(packages)


def collect_opens(module_names: Iterable[str], jmods: Optional[str]) -> List[str]:
    """
    Gets the ``--add-opens`` directives for every package of the modules in `module_names`
    whose jmod file exists in the `jmods` directory. The result has no duplicates and keeps
    the order in which directives are first found.
    """
    directives: Dict[str, None] = {}
    if not jmods:
        warn("No JDK found, no packages will be opened")
        return []
    if not isdir(jmods):
        warn(f"Directory containing JMOD files does not exist: {jmods}. No packages will be opened.")
        return []
    for module in module_names:
        jmod_path = join(jmods, module + ".jmod")
        if not exists(jmod_path):
            logv(f"Skipping module {module}: {jmod_path} does not exist")
            continue
        for package in module_packages(module, jmod_path):
            directives.setdefault(opens_directive(module, package))
    return list(directives)


def write_argument_file(path: str, args: Iterable[str]) -> None:
    """
    Replaces the content of the argument file at `path` with `args`, creating missing parent
    directories. Aborts if the file cannot be written.
    """
    try:
        existed = exists(path)
        with SafeFileCreation(path) as sfc:
            with open(sfc.tmpPath, "w", newline="", encoding="utf-8") as fp:
                java_argument_file.write_to_file(fp, list(args))
    except OSError as e:
        abort(f"Error while writing to {path}: {e}")
    logv(("updated " if existed else "created ") + path)


def argument_file_reference(path: str) -> str:
    return java_argument_file.reference(path)


def generate(module_names: Iterable[str], runtime_home: Optional[str], output_path: str) -> str:
    """
    Writes the ``--add-opens`` directives for `module_names` found in the jmod files of the
    JDK at `runtime_home` to the argument file `output_path`.

    :return: the ``@<path>`` launcher argument referencing the argument file
    """
    directives = collect_opens(module_names, jmods_dir(runtime_home))
    write_argument_file(output_path, directives)
    logv(f"{len(directives)} --add-opens directives written to {os.path.abspath(output_path)}")
    return argument_file_reference(output_path)
