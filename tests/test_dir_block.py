import unittest

import constants as C
from dir_block import DirBlock, decode_name, name_matches
from structures import DirectoryBlockStruct


def slot(name: bytes) -> bytes:
    return name.ljust(C.DIRECTORY_NAME_BYTES, b'\x00')


class NameMatchTestCase(unittest.TestCase):
    def test_exact(self):
        self.assertTrue(name_matches(slot(b"abc"), b"abc"))

    def test_prefix_of_stored_name(self):
        self.assertFalse(name_matches(slot(b"abcdef"), b"abc"))

    def test_longer_than_stored_name(self):
        self.assertFalse(name_matches(slot(b"abc"), b"abcd"))

    def test_full_slot_without_terminator(self):
        full = b"z" * C.DIRECTORY_NAME_BYTES
        self.assertTrue(name_matches(full, full))
        self.assertFalse(name_matches(full, full[:-1]))
        self.assertFalse(name_matches(full, full + b"z"))

    def test_garbage_after_terminator(self):
        stored = b"abc\x00garbage".ljust(C.DIRECTORY_NAME_BYTES, b'\x01')
        self.assertTrue(name_matches(stored, b"abc"))
        self.assertEqual(decode_name(stored), "abc")

    def test_empty_component(self):
        self.assertFalse(name_matches(slot(b""), b""))


class DirBlockTestCase(unittest.TestCase):
    def setUp(self):
        entries = [dict(d_ino=0, d_name=slot(b"gone"))] + \
                  [dict(d_ino=5, d_name=slot(b"five"))] + \
                  [dict(d_ino=6, d_name=slot(b"five"))] + \
                  [dict(d_ino=0, d_name=slot(b""))] * 13
        data = DirectoryBlockStruct(1024).build(entries)
        self.block = DirBlock(9, DirectoryBlockStruct(1024).parse(data))

    def test_find(self):
        self.assertEqual(self.block.find("five"), 5)
        self.assertEqual(self.block.find("gone"), 0)
        self.assertEqual(self.block.find("six"), 0)

    def test_entries(self):
        self.assertEqual(list(self.block.entries()), [(5, "five"), (6, "five")])
        self.assertEqual(self.block.list(), ["five", "five"])


if __name__ == '__main__':
    unittest.main()
