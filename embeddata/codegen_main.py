# -*- Mode: Python -*-
#
# SPDX-License-Identifier: LGPL-2.1-or-later
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see <http://www.gnu.org/licenses/>.

import argparse

from . import codegen
from .config import VERSION, Configuration
from .utils import EmbedError, print_error


def build_arg_parser():
    arg_parser = argparse.ArgumentParser(
        prog="go-embed-data",
        description="Generate a Go source file embedding the contents of data files",
        allow_abbrev=False,
    )
    arg_parser.add_argument(
        "sources", metavar="FILE", nargs="*", help="Data file to embed"
    )
    # Bazel passes Go-style single dash flags
    arg_parser.add_argument(
        "--label",
        "-label",
        default="",
        help="Label of the rule being executed (required)",
    )
    arg_parser.add_argument(
        "--package", "-package", default="", help="Go package name (required)"
    )
    arg_parser.add_argument(
        "--var", "-var", default="", help="Variable name (required)"
    )
    arg_parser.add_argument(
        "--multi",
        "-multi",
        action="store_true",
        help="Whether the variable is a map or a single value",
    )
    arg_parser.add_argument(
        "--out", "-out", default="", help="Go file to generate (required)"
    )
    arg_parser.add_argument(
        "--workspace",
        "-workspace",
        default="",
        help="Name of the workspace (required)",
    )
    arg_parser.add_argument(
        "--flatten",
        "-flatten",
        action="store_true",
        help="Whether to access files by base name",
    )
    arg_parser.add_argument(
        "--string",
        "-string",
        action="store_true",
        help="Whether to store contents as strings",
    )
    arg_parser.add_argument(
        "--version", action="version", version="%(prog)s " + VERSION
    )
    return arg_parser


def codegen_main(argv=None):
    arg_parser = build_arg_parser()
    args = arg_parser.parse_intermixed_args(argv)

    config = Configuration.from_args(args)
    try:
        config.validate()
    except EmbedError as e:
        print_error(str(e))

    header = codegen.Header()
    try:
        with open(config.out, "wb") as outfile:
            gen = codegen.CodeGenerator(config, header, outfile)
            gen.generate()
    except (EmbedError, OSError) as e:
        print_error(str(e))

    return 0
