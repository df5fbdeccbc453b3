from typing import Any, Generator, TYPE_CHECKING
from construct import Container
from enum import Enum
from math import ceil
import constants as C
from errors import InvalidInode
from structures import InodeStruct
from zone_index_block import ZoneIndexBlock
from utils import is_directory, is_regular_file, permissions_string

if TYPE_CHECKING:
    from disk import Disk


class FILE_TYPE(Enum):
    FIFO = 0o010000
    CHAR_DEVICE = 0o020000
    DIR = 0o040000
    BLOCK_DEVICE = 0o060000
    FILE = 0o100000
    SYMLINK = 0o120000
    SOCKET = 0o140000
    UNKNOWN = 0

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class Inode:
    """
    只读的inode
    文件的第 L 个逻辑块先换算成第 L // blocks_per_zone 个zone，
    zone号依次来自7个直接索引、一次间接块、二次间接块，
    任何一层的zone号为0都表示空洞，此时物理块号返回0
    """
    def __init__(self, index: int, data: Container[Any], disk: 'Disk'):
        self.index = index
        self.data = data
        self.disk = disk

    @classmethod
    def from_index(cls, index: int, disk: 'Disk'):
        """
        通过Inode号码构造Inode对象
        """
        superblock = disk.superblock
        if index == 0 or index > superblock.ninodes:
            raise InvalidInode(index, superblock.ninodes)
        inode_bytes = disk.read_bytes(superblock.inode_offset(index), C.INODE_BYTES)
        return cls(index, InodeStruct.parse(inode_bytes), disk)

    @property
    def mode(self) -> int:
        return self.data.i_mode

    @property
    def file_type(self) -> FILE_TYPE:
        return FILE_TYPE(self.mode & C.MODE_TYPE_MASK)

    @property
    def is_dir(self) -> bool:
        return is_directory(self.mode)

    @property
    def is_regular(self) -> bool:
        return is_regular_file(self.mode)

    @property
    def permissions(self) -> str:
        return permissions_string(self.mode)

    @property
    def size(self) -> int:
        return self.data.i_size

    @property
    def block_count(self) -> int:
        return ceil(self.size / self.disk.superblock.block_size)

    def _get_zone_index(self, zone_index: int) -> tuple[int, int, int]:
        """
        返回 (第一层, 第二层, 第三层) 的下标，-1 表示没有这一层
        第一层的下标 0-6 是直接索引，7 是一次间接，8 是二次间接
        """
        per_block = self.disk.superblock.pointers_per_block
        if zone_index < C.DIRECT_ZONES:
            return zone_index, -1, -1
        zone_index -= C.DIRECT_ZONES
        if zone_index < per_block:
            return C.DIRECT_ZONES, zone_index, -1
        zone_index -= per_block
        return C.DIRECT_ZONES + 1, zone_index // per_block, zone_index % per_block

    def peek_zone(self, zone_index: int) -> int:
        index_1, index_2, index_3 = self._get_zone_index(zone_index)

        # 直接索引
        if index_2 == -1:
            return self.data.i_zone[index_1]

        # 一次间接
        if index_3 == -1:
            if self.data.i_indirect == 0:
                return 0
            return ZoneIndexBlock.from_zone(self.data.i_indirect, self.disk)[index_2]

        # 二次间接
        if self.data.i_double_indirect == 0:
            return 0
        block_1 = ZoneIndexBlock.from_zone(self.data.i_double_indirect, self.disk)
        block_2 = block_1.subblock(index_2)
        if block_2 is None:
            return 0
        return block_2[index_3]

    def peek_block(self, logical_block: int) -> int:
        """
        逻辑块号 -> 物理块号（相对文件系统起始），0 表示空洞
        """
        blocks_per_zone = self.disk.superblock.blocks_per_zone
        zone = self.peek_zone(logical_block // blocks_per_zone)
        if zone == 0:
            return 0
        return zone * blocks_per_zone + logical_block % blocks_per_zone

    def block_list(self, start_block: int = 0) -> Generator[int, None, None]:
        """
        按顺序返回文件每个逻辑块对应的物理块号，空洞为0
        """
        for logical_block in range(start_block, self.block_count):
            yield self.peek_block(logical_block)
