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

import textwrap

from .escape import escape_file
from .utils import ConfigurationError, print_warning, quote

HEADER_TEMPLATE = textwrap.dedent(
    """\
    // Generated by go_embed_data for {label}. DO NOT EDIT.

    package {package}

    """
)

MAP_TEMPLATE = "var {var} = map[string]{type}{{\n{entries}}}\n\n"

MAP_ENTRY_TEMPLATE = "\t{key}: {var}_{index},\n"


class Header:
    """The fixed preamble of a generated file.

    In multi mode it also carries the map literal that ties every key to
    the positional variable holding that file's contents.
    """

    def __init__(
        self,
        template=HEADER_TEMPLATE,
        map_template=MAP_TEMPLATE,
        entry_template=MAP_ENTRY_TEMPLATE,
    ):
        self.template = template
        self.map_template = map_template
        self.entry_template = entry_template

    def render(self, config):
        text = self.template.format(label=config.label, package=config.package)
        if config.multi:
            entries = ""
            for i, filename in enumerate(config.sources):
                entries += self.entry_template.format(
                    key=quote(config.key(filename)), var=config.var, index=i
                )
            text += self.map_template.format(
                var=config.var, type=config.type_name(), entries=entries
            )
        return text


class CodeGenerator:
    def __init__(self, config, header, outfile):
        self.config = config
        self.header = header
        self.outfile = outfile

    def write(self, text):
        self.outfile.write(text.encode("utf-8", "surrogateescape"))

    def data_delimiters(self):
        if self.config.str_data:
            return '"', '"\n'
        return '[]byte("', '")\n'

    def check_keys(self):
        seen = set()
        for filename in self.config.sources:
            key = self.config.key(filename)
            if key in seen:
                print_warning(
                    "Key {} used by more than one source ({})".format(
                        quote(key), filename
                    )
                )
            seen.add(key)

    def generate(self):
        if not self.config.multi and len(self.config.sources) != 1:
            raise ConfigurationError(
                "Single value wanted, but got {} sources".format(
                    len(self.config.sources)
                )
            )
        if self.config.multi:
            self.check_keys()

        self.write(self.header.render(self.config))
        if self.config.multi:
            self.embed_multiple_files()
        else:
            self.embed_single_file()

    def embed_single_file(self):
        data_begin, data_end = self.data_delimiters()
        self.write("var {} = {}".format(self.config.var, data_begin))
        escape_file(self.config.sources[0], self.outfile)
        self.write(data_end)

    def embed_multiple_files(self):
        if not self.config.sources:
            return

        data_begin, data_end = self.data_delimiters()
        self.write("var (\n")
        for i, filename in enumerate(self.config.sources):
            self.write("\t{}_{} = {}".format(self.config.var, i, data_begin))
            escape_file(filename, self.outfile)
            self.write(data_end)
        self.write(")\n")
