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

"""Escaping of arbitrary bytes into the body of a Go string literal.

Within a Go interpreted string literal any character may appear except
newline and an unescaped double quote; backslash starts an escape.  The
compiler may also reject NUL and a byte order mark anywhere in the source
text.  Everything else that is valid UTF-8 is copied through unchanged,
and every byte that is not part of a valid UTF-8 sequence is written as a
\\xHH escape, so any input, text or binary, survives the trip through the
Go compiler byte for byte.
"""

import functools
import re

CHUNK_SIZE = 64 * 1024

BYTE_ORDER_MARK = "\ufeff"

# ASCII bytes that can be copied verbatim: all but NUL, newline, '"' and '\'
_PLAIN_RUN = re.compile(rb"[\x01-\x09\x0b-\x21\x23-\x5b\x5d-\x7f]+")

_BACKSLASH_ESCAPES = {
    0x5C: b"\\\\",
    0x22: b'\\"',
    0x0A: b"\\n",
    0x00: b"\\x00",
}


def _sequence_length(lead):
    """Length of the UTF-8 sequence introduced by lead, or 0 if lead can
    never start a valid sequence."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _escape_window(data, final):
    """Escape the bytes of data that can be classified.

    Returns the list of output pieces and the offset of the first byte
    that was not consumed.  Unless final is set, a code point that may be
    cut off at the end of data is left unconsumed so the caller can retry
    once more input is available.
    """
    out = []
    pos = 0
    end = len(data)
    while pos < end:
        m = _PLAIN_RUN.match(data, pos)
        if m:
            out.append(m.group())
            pos = m.end()
            continue

        b = data[pos]
        escaped = _BACKSLASH_ESCAPES.get(b)
        if escaped is not None:
            out.append(escaped)
            pos += 1
            continue

        size = _sequence_length(b)
        if size and pos + size > end and not final:
            break
        if size:
            seq = bytes(data[pos : pos + size])
            try:
                decoded = seq.decode("utf-8")
            except UnicodeDecodeError:
                decoded = None
            if decoded is not None and decoded != BYTE_ORDER_MARK:
                out.append(seq)
                pos += size
                continue

        # Invalid, truncated or a byte order mark: one byte at a time, so
        # that a valid sequence starting inside it is still found.
        out.append(b"\\x%02x" % b)
        pos += 1
    return out, pos


def iter_escaped(chunks):
    """Escape a stream given as an iterable of byte chunks.

    Yields one escaped piece per input chunk (possibly empty).  At most
    three bytes of lookahead are carried from one chunk to the next.
    """
    pending = b""
    for chunk in chunks:
        window = pending + chunk
        pieces, pos = _escape_window(window, final=False)
        pending = window[pos:]
        yield b"".join(pieces)
    if pending:
        pieces, pos = _escape_window(pending, final=True)
        yield b"".join(pieces)


def escape(data):
    return b"".join(iter_escaped([data]))


class EscapeWriter:
    """File-like sink that escapes everything written to it into outfile.

    close() must be called to flush a trailing incomplete sequence; it
    does not close outfile.
    """

    def __init__(self, outfile):
        self.outfile = outfile
        self.closed = False
        self._pending = b""

    def write(self, data):
        if self.closed:
            raise ValueError("write to closed EscapeWriter")
        window = self._pending + bytes(data)
        pieces, pos = _escape_window(window, final=False)
        self._pending = window[pos:]
        self.outfile.write(b"".join(pieces))
        return len(data)

    def close(self):
        if self.closed:
            return
        self.closed = True
        if self._pending:
            pieces, pos = _escape_window(self._pending, final=True)
            self._pending = b""
            self.outfile.write(b"".join(pieces))

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def escape_file(filename, outfile, chunk_size=CHUNK_SIZE):
    """Stream the contents of filename, escaped, into outfile."""
    with open(filename, "rb") as f:
        chunks = iter(functools.partial(f.read, chunk_size), b"")
        for piece in iter_escaped(chunks):
            if piece:
                outfile.write(piece)
