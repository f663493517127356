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
The powermock_opens package.

Generates a Java argument file opening the packages of JDK modules to the unnamed module and
attaches it to the test tasks of a build.

DO NOT WRITE IMPLEMENTATION CODE HERE.
"""

from ._impl.build import JavaPlugin, Plugin, Project, Task, TestTask
from ._impl.config import (
    CONFIG_RESOURCE,
    FileSource,
    ModuleListSource,
    PackagedResourceSource,
    StaticSource,
    load_config,
    parse_module_list,
)
from ._impl.jdk import get_java_home
from ._impl.opens import (
    ARGFILE_DIR,
    ARGFILE_NAME,
    argument_file_reference,
    collect_opens,
    default_argument_file,
    generate,
    jmods_dir,
    module_packages,
    opens_directive,
    package_of,
    write_argument_file,
)
from ._impl.plugin import PowermockOpens, PowermockOpensPlugin
from ._impl.powermock_opens import main, version
from ._impl.support.logging import abort, log, log_error, logv, logvv, warn
from ._impl.support.options import get_opts, set_opts

__version__ = version
