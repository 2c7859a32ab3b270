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

import os
import posixpath

from .utils import ConfigurationError

VERSION = "0.1.0"

# Options without which no output is generated, in the order they are checked
REQUIRED_OPTIONS = ("label", "package", "var", "out", "workspace")


class Configuration:
    def __init__(
        self,
        label="",
        package="",
        var="",
        multi=False,
        sources=None,
        out="",
        workspace="",
        flatten=False,
        str_data=False,
    ):
        self.label = label
        self.package = package
        self.var = var
        self.multi = multi
        self.sources = list(sources) if sources else []
        self.out = out
        self.workspace = workspace
        self.flatten = flatten
        self.str_data = str_data

    @classmethod
    def from_args(cls, args):
        return cls(
            label=args.label,
            package=args.package,
            var=args.var,
            multi=args.multi,
            sources=args.sources,
            out=args.out,
            workspace=args.workspace,
            flatten=args.flatten,
            str_data=args.string,
        )

    def validate(self):
        for option in REQUIRED_OPTIONS:
            if not getattr(self, option):
                raise ConfigurationError("--{} option not provided".format(option))
        if not self.multi and len(self.sources) != 1:
            raise ConfigurationError(
                "--multi flag not given, so want exactly one source; got {}".format(
                    len(self.sources)
                )
            )

    def type_name(self):
        if self.str_data:
            return "string"
        return "[]byte"

    def key(self, filename):
        """Map key under which the contents of filename are stored.

        Sources from an external repository are keyed relative to that
        repository.  With flatten set, only the base name is used.
        """
        if self.flatten:
            return posixpath.basename(filename.rstrip("/"))
        workspace_prefix = "external/" + self.workspace + "/"
        key = filename
        if key.startswith(workspace_prefix):
            key = key[len(workspace_prefix) :]
        if os.sep != "/":
            key = key.replace("/", os.sep)
        return key
