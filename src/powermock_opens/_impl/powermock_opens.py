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
r"""
powermock-opens generates a Java argument file with one ``--add-opens`` option per package of a
fixed set of JDK modules, so that PowerMock tests can reflect on JDK internals.

The module list is bundled with the package. The JDK is taken from --java-home, JAVA_HOME or the
``java`` on the PATH, in that order.
"""

from __future__ import annotations

__all__ = ["main", "ArgParser", "commands"]

import os
import sys
from argparse import ArgumentParser, HelpFormatter, Namespace
from typing import Callable, Dict, List, Optional

from . import opens
from .config import load_config
from .jdk import get_java_home
from .support.logging import _check_stdout_encoding, abort, log
from .support.options import set_opts

version = "1.2"


def _generate(args: Namespace) -> None:
    """write the argument file below the build root and print its @-reference"""
    arg_file = opens.default_argument_file(args.root)
    reference = opens.generate(load_config(), get_java_home(args.java_home), arg_file)
    log(reference)


def _modules(args: Namespace) -> None:
    """print the configured module names"""
    for module in load_config():
        log(module)


def _opens(args: Namespace) -> None:
    """print the --add-opens options without writing a file"""
    jmods = opens.jmods_dir(get_java_home(args.java_home))
    for directive in opens.collect_opens(load_config(), jmods):
        log(directive)


commands: Dict[str, Callable[[Namespace], None]] = {
    "generate": _generate,
    "modules": _modules,
    "opens": _opens,
}


def _format_commands() -> str:
    lines = ["available commands:"]
    for name in sorted(commands):
        lines.append(f"    {name:<12}{commands[name].__doc__}")
    return os.linesep.join(lines)


class ArgParser(ArgumentParser):

    def __init__(self):
        ArgumentParser.__init__(self, prog="powermock-opens", description=__doc__, epilog=_format_commands(),
                                formatter_class=lambda prog: HelpFormatter(prog, max_help_position=32, width=120))
        self.add_argument("-v", action="store_true", dest="verbose", help="enable verbose output")
        self.add_argument("-V", action="store_true", dest="very_verbose", help="enable very verbose output")
        self.add_argument("--no-warning", action="store_false", dest="warn", help="disable warning messages")
        self.add_argument("--quiet", action="store_true", help="disable log messages")
        self.add_argument("--java-home", help="JDK directory whose jmods are scanned (default: JAVA_HOME)", metavar="<path>")
        self.add_argument("--root", help="build root directory (default: current directory)", metavar="<path>", default=os.getcwd())
        self.add_argument("--version", action="version", version="powermock-opens version " + version)
        self.add_argument("command", nargs="?", default="generate", choices=sorted(commands), metavar="command",
                          help="the command to run (default: generate)")


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgParser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    set_opts(verbose=args.verbose, very_verbose=args.very_verbose, warn=args.warn, quiet=args.quiet)
    _check_stdout_encoding()

    command = commands.get(args.command)
    if command is None:
        abort(f"Unknown command: {args.command}")
    try:
        command(args)
    except KeyboardInterrupt:
        # no need to show the stack trace when the user presses CTRL-C
        abort(1)
    return 0


def _main_wrapper():
    sys.exit(main())


if __name__ == "__main__":
    _main_wrapper()
