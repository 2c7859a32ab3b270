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

import sys


class Color:
    """ANSI Terminal colors"""

    YELLOW = "\033[1;33m"
    RED = "\033[1;31m"
    END = "\033[0m"


def print_color(msg, color=Color.END, prefix="MESSAGE"):
    """Print a string with a color prefix"""
    if sys.stderr.isatty():
        real_prefix = "{start}{prefix}{end}".format(
            start=color, prefix=prefix, end=Color.END
        )
    else:
        real_prefix = prefix
    sys.stderr.write("{prefix}: {msg}\n".format(prefix=real_prefix, msg=msg))


def print_error(msg):
    """Print an error string and exit"""
    print_color(msg, color=Color.RED, prefix="ERROR")
    sys.exit(1)


def print_warning(msg):
    """Print a warning string"""
    print_color(msg, color=Color.YELLOW, prefix="WARNING")


class EmbedError(Exception):
    pass


class ConfigurationError(EmbedError):
    pass


_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def quote(s):
    """Return a double-quoted Go string literal representing s.

    The result follows Go's strconv.Quote: printable characters are kept,
    control characters get short or \\x escapes and other non-printable
    characters get \\u or \\U escapes.  Bytes that could not be decoded
    when s was built with the 'surrogateescape' error handler (as
    os.fsdecode() does for command-line paths) come out as \\x escapes of
    the original byte.
    """
    ret = '"'
    for c in s:
        cp = ord(c)
        if c in _SHORT_ESCAPES:
            ret += _SHORT_ESCAPES[c]
        elif 0xDC80 <= cp <= 0xDCFF:
            ret += "\\x{:02x}".format(cp - 0xDC00)
        elif c.isprintable():
            ret += c
        elif cp < 0x20 or cp == 0x7F:
            ret += "\\x{:02x}".format(cp)
        elif 0xD800 <= cp <= 0xDFFF:
            ret += "\\ufffd"
        elif cp < 0x10000:
            ret += "\\u{:04x}".format(cp)
        else:
            ret += "\\U{:08x}".format(cp)
    ret += '"'
    return ret
