#!/usr/bin/python3
# -*- coding: utf-8 -*-
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
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,
# MA  02110-1301  USA

"""Unit tests for escaping bytes into Go string literals."""

import io
import os
import random
import tempfile
import unittest

import goliteral

from embeddata.escape import EscapeWriter, escape, escape_file, iter_escaped


class TestEscape(unittest.TestCase):
    """Test the escaping of individual bytes and code points."""

    def assertRoundTrips(self, data):
        escaped = escape(data)
        self.assertEqual(goliteral.unescape(escaped), data)
        return escaped

    def test_empty(self):
        self.assertEqual(escape(b""), b"")

    def test_plain_ascii(self):
        data = b"Hello, world! \t\r{}[]'`~\x7f"
        self.assertEqual(escape(data), data)

    def test_quote_and_backslash(self):
        self.assertEqual(escape(b'A"\\'), b'A\\"\\\\')

    def test_newline(self):
        self.assertEqual(escape(b"one\ntwo\n"), b"one\\ntwo\\n")

    def test_nul(self):
        self.assertEqual(escape(b"a\x00b"), b"a\\x00b")

    def test_multibyte_passthrough(self):
        for text in ["é", "€", "日本語", "\U0001f600"]:
            with self.subTest(text=text):
                data = text.encode("utf-8")
                self.assertEqual(escape(data), data)

    def test_replacement_character(self):
        """A validly encoded U+FFFD is an ordinary code point."""
        self.assertEqual(escape(b"a\xef\xbf\xbdb"), b"a\xef\xbf\xbdb")

    def test_byte_order_mark(self):
        """A byte order mark is escaped one byte at a time."""
        self.assertEqual(escape(b"\xef\xbb\xbf"), b"\\xef\\xbb\\xbf")
        self.assertEqual(
            escape("a\ufeffb".encode("utf-8")), b"a\\xef\\xbb\\xbfb"
        )

    def test_invalid_bytes(self):
        cases = [
            (b"\xff", b"\\xff"),
            (b"\x80abc", b"\\x80abc"),
            (b"\xc0\xaf", b"\\xc0\\xaf"),
            (b"\xe0\x80\xaf", b"\\xe0\\x80\\xaf"),
            (b"\xed\xa0\x80", b"\\xed\\xa0\\x80"),
            (b"\xf4\x90\x80\x80", b"\\xf4\\x90\\x80\\x80"),
            (b"\xf8\x88\x80\x80\x80", b"\\xf8\\x88\\x80\\x80\\x80"),
        ]
        for data, expected in cases:
            with self.subTest(data=data):
                self.assertEqual(escape(data), expected)

    def test_resynchronises_after_invalid_lead(self):
        """A valid sequence right after a broken one is passed through."""
        self.assertEqual(escape(b"\xe2\x82\xc3\xa9"), b"\\xe2\\x82\xc3\xa9")
        self.assertEqual(escape(b"\xe2\xe2\x82\xac"), b"\\xe2\xe2\x82\xac")

    def test_truncated_at_end(self):
        self.assertEqual(escape(b"ab\xe2\x82"), b"ab\\xe2\\x82")
        self.assertEqual(escape(b"\xf0\x9f\x98"), b"\\xf0\\x9f\\x98")

    def test_no_bare_special_characters(self):
        escaped = escape(b'"\\\n' * 10)
        self.assertNotIn(b"\n", escaped)
        self.assertEqual(escaped, b'\\"\\\\\\n' * 10)

    def test_all_byte_values(self):
        self.assertRoundTrips(bytes(range(256)))

    def test_random_binary(self):
        rng = random.Random(1234)
        for _ in range(50):
            data = bytes(rng.randrange(256) for _ in range(rng.randrange(300)))
            with self.subTest(data=data):
                self.assertRoundTrips(data)

    def test_mixed_text(self):
        data = 'say "héllo"\n\tto C:\\path\x00 \ufeff€ 日本 \U0001f600\n'.encode(
            "utf-8"
        )
        escaped = self.assertRoundTrips(data)
        self.assertIn("héllo".encode("utf-8"), escaped)
        self.assertIn("\U0001f600".encode("utf-8"), escaped)


class TestStreaming(unittest.TestCase):
    """Test that chunked input gives the same output as one block."""

    DATA = 'a€b\ufeff\xe9\U0001f600"\n'.encode("utf-8") + b"\xe2\x82\xff\x00z"

    def test_code_point_split_across_chunks(self):
        chunks = [b"x\xe2", b"\x82", b"\xacy"]
        self.assertEqual(b"".join(iter_escaped(chunks)), b"x\xe2\x82\xacy")

    def test_one_byte_chunks(self):
        chunks = [self.DATA[i : i + 1] for i in range(len(self.DATA))]
        self.assertEqual(b"".join(iter_escaped(chunks)), escape(self.DATA))

    def test_empty_chunks(self):
        chunks = [b"", b"\xc3", b"", b"\xa9", b""]
        self.assertEqual(b"".join(iter_escaped(chunks)), b"\xc3\xa9")

    def test_truncated_across_chunks(self):
        chunks = [b"\xf0\x9f", b"\x98"]
        self.assertEqual(b"".join(iter_escaped(chunks)), b"\\xf0\\x9f\\x98")

    def test_iter_escaped_is_lazy(self):
        def chunks():
            yield b"abc"
            raise RuntimeError("read too far")

        pieces = iter_escaped(chunks())
        self.assertEqual(next(pieces), b"abc")
        with self.assertRaises(RuntimeError):
            next(pieces)

    def test_escape_writer(self):
        out = io.BytesIO()
        with EscapeWriter(out) as w:
            for i in range(len(self.DATA)):
                self.assertEqual(w.write(self.DATA[i : i + 1]), 1)
        self.assertEqual(out.getvalue(), escape(self.DATA))

    def test_escape_writer_flushes_on_close(self):
        out = io.BytesIO()
        w = EscapeWriter(out)
        w.write(b"ok\xe2\x82")
        self.assertEqual(out.getvalue(), b"ok")
        w.close()
        self.assertEqual(out.getvalue(), b"ok\\xe2\\x82")
        with self.assertRaises(ValueError):
            w.write(b"more")

    def test_escape_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filename = os.path.join(tmpdir, "data.bin")
            with open(filename, "wb") as f:
                f.write(self.DATA)
            for chunk_size in (1, 2, 3, 5, 64 * 1024):
                with self.subTest(chunk_size=chunk_size):
                    out = io.BytesIO()
                    escape_file(filename, out, chunk_size=chunk_size)
                    self.assertEqual(out.getvalue(), escape(self.DATA))

    def test_escape_file_missing(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(FileNotFoundError):
                escape_file(os.path.join(tmpdir, "missing"), io.BytesIO())


if __name__ == "__main__":
    unittest.main()
