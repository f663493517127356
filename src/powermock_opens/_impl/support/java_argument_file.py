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
Java argument files, i.e. files with launcher arguments that are passed using the @-syntax
(e.g. ``java @powermock-open-modules.argfile``).

Using the @-syntax inside an argument file is not supported and is interpreted by java as
a literal argument.

See also the JAVA COMMAND-LINE ARGUMENT FILES section in ``man 1 java``
"""

__all__ = [
    "escape_argument",
    "format_arguments",
    "reference",
    "write_to_file",
]

import os
from typing import Sequence, TextIO

LINE_SEPARATOR = "\n"
"""
Arguments are always separated by a plain newline so that the file content does not depend on the host.
The java launcher accepts both ``\\n`` and ``\\r\\n``.
"""

SPECIAL_CHARS = [" ", "'", '"', "\n", "\r", "\t", "\f"]
"""
If any of these characters appear in an argument, the argument has to be put in double quotes and properly escaped.

Backslashes by themselves don't require quoting, but if the argument is put in quotes, backslashes have to be escaped.
"""


def escape_argument(arg: str) -> str:
    """
    Escapes a single commandline argument for use in a Java argument file.

    The returned argument can be put on its own line or next to other arguments on the same line separated by a space.
    """
    if not arg:
        # Empty arguments need to be quoted, otherwise they are ignored
        return '""'

    if any((c in arg for c in SPECIAL_CHARS)):
        escaped = (
            # Inside quotes, backslashes are escape characters
            arg.replace("\\", "\\\\")
            .replace("'", "\\'")
            .replace('"', '\\"')
            # Control characters are written as their literal escape sequence
            .replace("\n", "\\n")
            .replace("\r", "\\r")
            .replace("\t", "\\t")
            .replace("\f", "\\f")
        )
        return f'"{escaped}"'
    return arg


def format_arguments(args: Sequence[str]) -> str:
    """
    Returns the content of an argument file holding `args`, one escaped argument per line.
    An empty sequence gives empty content.
    """
    return "".join(escape_argument(arg) + LINE_SEPARATOR for arg in args)


def write_to_file(file: TextIO, args: Sequence[str]) -> None:
    """
    Writes the given arguments in the correct format to the given file opened in text mode.
    The file should be opened with ``newline=""`` to keep the separator unchanged.
    """
    file.write(format_arguments(args))


def reference(path: str) -> str:
    """
    Gets the launcher argument that expands to the content of the argument file at `path`.
    The path is made absolute and uses forward slashes, which the java launcher also accepts on Windows.
    """
    return "@" + os.path.abspath(path).replace("\\", "/")
