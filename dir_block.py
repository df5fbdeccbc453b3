import os
from typing import TYPE_CHECKING, Generator
from construct import Container
import constants as C
from structures import DirectoryBlockStruct

if TYPE_CHECKING:
    from disk import Disk


def name_matches(stored: bytes, wanted: bytes) -> bool:
    """
    目录项的名字占60字节，短名字以0结尾，正好60字节的名字没有结尾的0
    """
    length = len(wanted)
    if length == 0 or length > C.DIRECTORY_NAME_BYTES:
        return False
    if stored[:length] != wanted:
        return False
    return length == C.DIRECTORY_NAME_BYTES or stored[length] == 0


def decode_name(stored: bytes) -> str:
    return os.fsdecode(stored.split(b'\x00', 1)[0])


class DirBlock:
    def __init__(self, block_number: int, dirs: list[Container]):
        self.block_number = block_number
        self.dirs = dirs

    @classmethod
    def from_index(cls, block_number: int, disk: 'Disk'):
        """
        通过块号构造目录块对象
        """
        block_size = disk.superblock.block_size
        dirs = DirectoryBlockStruct(block_size).parse(disk.read_block(block_number))
        return cls(block_number, dirs)

    def find(self, name: str) -> int:
        """
        返回第一个名字完全相同的目录项的inode号，找不到返回0
        """
        wanted = os.fsencode(name)
        for dir in self.dirs:
            if dir.d_ino != 0 and name_matches(dir.d_name, wanted):
                return dir.d_ino
        return 0

    def entries(self) -> Generator[tuple[int, str], None, None]:
        for dir in self.dirs:
            if dir.d_ino != 0:
                yield dir.d_ino, decode_name(dir.d_name)

    def list(self) -> list[str]:
        return [name for _, name in self.entries()]
