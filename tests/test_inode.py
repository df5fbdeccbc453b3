import os
import tempfile
import unittest

import constants as C
from disk import Disk
from errors import InvalidInode
from inode import FILE_TYPE
from tests.image_builder import ImageBuilder, write_image

BLOCK = 1024
POINTERS = BLOCK // 4          # 256
FIRST_DOUBLE = 7 + POINTERS    # 第一个需要二次间接的逻辑块

# 逻辑块 -> 手工指定的zone
ZONES = {
    0: 500,
    6: 506,
    7: 600,
    8: 601,
    FIRST_DOUBLE - 1: 699,
    FIRST_DOUBLE: 700,
    FIRST_DOUBLE + 1: 701,
    FIRST_DOUBLE + POINTERS + 3: 702,
}
BLOCK_COUNT = FIRST_DOUBLE + POINTERS + 4


def fill(logical: int) -> bytes:
    return bytes([logical % 251 + 1]) * BLOCK


class InodeStoreTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        builder = ImageBuilder(ninodes=32)
        self.file_no = builder.add_file(builder.root, "f", b"abc")
        image = write_image(os.path.join(self.temp_dir.name, 'inodes.img'), builder.build())
        self.disk = Disk(image)
        self.disk.mount()

    def tearDown(self):
        self.disk.unmount()
        self.temp_dir.cleanup()

    def test_root(self):
        root = self.disk.read_inode(C.INODE_ROOT_NO)
        self.assertTrue(root.is_dir)
        self.assertEqual(root.file_type, FILE_TYPE.DIR)
        self.assertEqual(root.permissions, "drwxr-xr-x")

    def test_file(self):
        inode = self.disk.read_inode(self.file_no)
        self.assertTrue(inode.is_regular)
        self.assertEqual(inode.size, 3)
        self.assertEqual(inode.block_count, 1)

    def test_zero(self):
        with self.assertRaises(InvalidInode):
            self.disk.read_inode(0)

    def test_beyond_ninodes(self):
        self.disk.read_inode(32)
        with self.assertRaises(InvalidInode):
            self.disk.read_inode(33)

    def test_unknown_type(self):
        inode = self.disk.read_inode(20)
        self.assertEqual(inode.file_type, FILE_TYPE.UNKNOWN)
        self.assertFalse(inode.is_dir)


class BlockResolverTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        builder = ImageBuilder(zones=1024)
        self.data = b"".join(fill(logical) if logical in ZONES else bytes(BLOCK) for logical in range(BLOCK_COUNT))
        sparse = set(range(BLOCK_COUNT)) - set(ZONES)
        self.file_no = builder.add_file(builder.root, "sparse", self.data, sparse=sparse, zones=ZONES)
        self.builder = builder
        self.image = os.path.join(self.temp_dir.name, 'zones.img')

    def tearDown(self):
        self.temp_dir.cleanup()

    def _mount(self) -> Disk:
        write_image(self.image, self.builder.build())
        disk = Disk(self.image)
        disk.mount()
        self.addCleanup(disk.unmount)
        return disk

    def test_direct(self):
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        self.assertEqual(inode.peek_block(0), 500)
        self.assertEqual(inode.peek_block(6), 506)
        self.assertEqual(inode.peek_block(1), 0)

    def test_single_indirect(self):
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        self.assertEqual(disk.get_file_block(inode, 7), 600)
        self.assertEqual(disk.get_file_block(inode, 8), 601)
        self.assertEqual(disk.get_file_block(inode, FIRST_DOUBLE - 1), 699)
        self.assertEqual(disk.get_file_block(inode, 9), 0)

    def test_double_indirect(self):
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE), 700)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE + 1), 701)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE + POINTERS + 3), 702)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE + POINTERS + 2), 0)
        # 第二个二级索引块不存在
        self.assertEqual(inode.peek_block(FIRST_DOUBLE + 2 * POINTERS), 0)

    def test_beyond_double_indirect(self):
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE + POINTERS * POINTERS + 5), 0)

    def test_block_list(self):
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        blocks = list(inode.block_list())
        self.assertEqual(len(blocks), BLOCK_COUNT)
        self.assertEqual({logical: zone for logical, zone in enumerate(blocks) if zone}, ZONES)

    def test_file_content(self):
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        self.assertEqual(b"".join(disk.iter_file(inode)), self.data)

    def test_missing_indirect_blocks(self):
        inode = self.builder.inodes[self.file_no]
        inode.i_indirect = 0
        inode.i_double_indirect = 0
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        self.assertEqual(inode.peek_block(0), 500)
        self.assertEqual(inode.peek_block(7), 0)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE), 0)

    def test_garbage_pointers(self):
        inode = self.builder.inodes[self.file_no]
        inode.i_indirect = 0xFFFFFFF0
        inode.i_double_indirect = 0x7FFFFFFF
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        for logical in range(BLOCK_COUNT):
            block = inode.peek_block(logical)
            if logical >= 7:
                self.assertEqual(block, 0)

    def test_garbage_second_level(self):
        inode = self.builder.inodes[self.file_no]
        first_level = self.builder.pointer_blocks[inode.i_double_indirect]
        first_level[0] = 1 << 30
        disk = self._mount()
        inode = disk.read_inode(self.file_no)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE), 0)
        self.assertEqual(inode.peek_block(FIRST_DOUBLE + POINTERS + 3), 702)


if __name__ == '__main__':
    unittest.main()
