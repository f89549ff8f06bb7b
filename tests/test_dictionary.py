import unittest
from .testcase import TestCase, ClosingStream, CountingNameFactory  # type: ignore

import io
import tempfile
from pathlib import Path
from random import Random
from string import ascii_lowercase

from namefactory.alphabet import Alphabet
from namefactory.dictionary import DictionaryNameFactory
from namefactory.source import DictionaryError


class TestDictionaryNameFactory(TestCase):

    def factory(self, text: str, **kwargs) -> DictionaryNameFactory:
        return DictionaryNameFactory(ClosingStream(text),
            CountingNameFactory(), **kwargs)

    def test_empty_dictionary(self):
        factory = self.factory("")
        self.assertEqual(list(factory.alphabet), list(ascii_lowercase))
        self.assertNames(factory, ["a", "b", "c"])

    def test_only_line_breaks(self):
        factory = self.factory("\n\n\r\n")
        self.assertEqual(factory.next_name(), "a")

    def test_counting(self):
        factory = self.factory("zyx")
        factory.alphabet = Alphabet("xyz")
        self.assertNames(factory,
            ["x", "y", "z", "xx", "yx", "zx", "xy", "yy", "zy", "xz"])

    def test_names_come_from_dictionary(self):
        factory = self.factory("# comment\nfoo\nbar\n")
        for name in factory.names(100):
            self.assertTrue(set(name) <= set("commentfoobar"))
            self.assertTrue(name.isidentifier())

    def test_duplicates(self):
        factory = self.factory("aabbcc")
        self.assertEqual(sorted(factory.alphabet), ["a", "b", "c"])

    def test_unique_names(self):
        factory = self.factory("abc")
        names = factory.names(5000)
        self.assertEqual(len(set(names)), len(names))

    def test_reset(self):
        fallback = CountingNameFactory()
        factory = DictionaryNameFactory(ClosingStream("pqrs"), fallback)
        first = factory.next_name()
        factory.names(10)

        factory.reset()
        self.assertEqual(fallback.resets, 1)
        self.assertEqual(factory.next_name(), first)

        factory.reset()
        factory.reset()
        self.assertEqual(fallback.resets, 3)
        self.assertEqual(factory.index, 0)

    def test_fallback_not_consulted(self):
        fallback = CountingNameFactory()
        factory = DictionaryNameFactory(ClosingStream("ab"), fallback)
        factory.names(1000)
        self.assertEqual(fallback.requests, 0)
        self.assertEqual(fallback.resets, 0)

    def test_fallback_required(self):
        self.assertRaises(TypeError, DictionaryNameFactory,
            ClosingStream("abc"), None)

    def test_seeded(self):
        text = "The quick brown fox jumps over the lazy dog"
        f1 = self.factory(text, random=Random(1))
        f2 = self.factory(text, random=Random(1))
        self.assertEqual(f1.names(200), f2.names(200))

    def test_shared_alphabet(self):
        """
        A factory built from another reuses its alphabet, but counts on its
        own.
        """
        original = self.factory("abcdefgh")
        original.names(5)
        fallback = CountingNameFactory()
        copy = DictionaryNameFactory(original, fallback)
        self.assertIs(copy.alphabet, original.alphabet)
        self.assertEqual(copy.index, 0)
        self.assertIs(copy.name_factory, fallback)
        self.assertEqual(copy.next_name(), original.alphabet[0])

        copy.reset()
        self.assertEqual(fallback.resets, 1)
        self.assertEqual(original.name_factory.resets, 0)
        self.assertEqual(original.index, 5)

    def test_stream_closed(self):
        stream = ClosingStream("abc")
        DictionaryNameFactory(stream, CountingNameFactory())
        self.assertTrue(stream.was_closed)

    def test_read_failure(self):
        stream = ClosingStream("abc", fail=True)
        self.assertRaisesChain([DictionaryError, OSError],
            DictionaryNameFactory, stream, CountingNameFactory())
        self.assertTrue(stream.was_closed)

    def test_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "dictionary.txt"
            path.write_text("ŝŝŝ\nœœ\n", encoding="utf-8")
            for source in (path, str(path), path.as_uri()):
                with self.subTest(source=source):
                    factory = DictionaryNameFactory(source,
                        CountingNameFactory())
                    self.assertEqual(sorted(factory.alphabet), ["œ", "ŝ"])

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.txt"
            self.assertRaisesChain([DictionaryError, FileNotFoundError],
                DictionaryNameFactory, path, CountingNameFactory())

    def test_binary_stream(self):
        factory = DictionaryNameFactory(io.BytesIO(b"aabbcc"),
            CountingNameFactory())
        self.assertEqual(sorted(factory.alphabet), ["a", "b", "c"])

    def test_undecodable_binary_stream(self):
        self.assertRaisesChain([DictionaryError, UnicodeDecodeError],
            DictionaryNameFactory, io.BytesIO(b"abc\xe9"),
            CountingNameFactory())

    def test_undecodable_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "latin1.txt"
            path.write_bytes("abc\xe9".encode("latin-1"))
            self.assertRaisesChain([DictionaryError, UnicodeDecodeError],
                DictionaryNameFactory, path, CountingNameFactory())


if __name__ == '__main__':
    unittest.main()
