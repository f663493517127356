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

__all__ = ["get_java_home", "java_home_property"]

import re
import shutil
import subprocess
from typing import Optional

from .support.envvars import get_env
from .support.logging import logv
from .support.system import exe_suffix

_java_home_re = re.compile(r"^\s*java\.home\s*=\s*(?P<home>.+?)\s*$", re.MULTILINE)

# seconds to wait for `java -XshowSettings`
_JAVA_PROPERTIES_TIMEOUT = 30


def java_home_property(java_exe: Optional[str] = None, timeout: float = _JAVA_PROPERTIES_TIMEOUT) -> Optional[str]:
    """
    Gets the ``java.home`` system property reported by `java_exe`, the ``java`` executable
    on the PATH by default. Returns None if there is no such executable, it fails or it does
    not finish within `timeout` seconds.
    """
    java_exe = java_exe or shutil.which(exe_suffix("java"))
    if not java_exe:
        return None
    try:
        # -XshowSettings prints to stderr
        proc = subprocess.run(
            [java_exe, "-XshowSettings:properties", "-version"],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=True,
            timeout=timeout,
        )
    except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
        logv(f"Could not query java.home of {java_exe}: {e}")
        return None
    m = _java_home_re.search(proc.stdout.decode(errors="replace"))
    if not m:
        return None
    return m.group("home")


def get_java_home(java_home: Optional[str] = None) -> Optional[str]:
    """
    Selects the JDK whose jmod files are scanned.

    The selection is attempted from `java_home` (the --java-home option), the JAVA_HOME
    environment variable and the ``java.home`` property of the ``java`` on the PATH in that
    order. The result is not checked for existence.
    """
    if java_home:
        source = "--java-home"
    else:
        java_home = get_env("JAVA_HOME")
        source = "JAVA_HOME"
    if not java_home:
        java_home = java_home_property()
        source = "java.home"
    if java_home:
        logv(f"Using JDK {java_home} (from {source})")
    else:
        logv("No JDK found in --java-home, JAVA_HOME or on the PATH")
    return java_home
