from dataclasses import dataclass
from typing import Generator
import constants as C
from block_device import ImageDevice
from dir_block import DirBlock
from errors import ImageReadError, InvalidInode, NotADirectory, NotARegularFile, PathNotFound
from inode import Inode
from partition import locate_partition
from superblock import Superblock
import pathname
from utils import debug_print


@dataclass
class FileStats():
    st_mode: int
    st_ino: int
    st_nlink: int
    st_uid: int
    st_gid: int
    st_size: int
    st_atime: int
    st_mtime: int
    st_ctime: int

    def items(self):
        return self.__dict__.items()


class Disk:
    """
    一个打开的MINIX文件系统
    镜像句柄、文件系统起始位置和超级块都属于这个对象，
    多个Disk之间互不影响；同一个Disk不能在多个线程里同时使用
    """
    def __init__(self, path: str, partition: int | None = None, subpartition: int | None = None):
        self.path = path
        self.partition = partition
        self.subpartition = subpartition
        self.mounted = False

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.unmount()

    def mount(self):
        debug_print(f"Disk.mount({self.path}, partition={self.partition}, subpartition={self.subpartition})")
        if self.mounted:
            return

        self.block_device = ImageDevice(self.path)
        try:
            self.block_device.fs_start = self._locate_filesystem()
            self.superblock = Superblock.load(self.block_device)
        except BaseException:
            self.block_device.close()
            raise
        self.block_device.block_size = self.superblock.block_size

        self.mounted = True
        debug_print(f"filesystem at byte {self.fs_start}, block size {self.superblock.block_size}, "
                    f"zone size {self.superblock.zone_size}")

    def _locate_filesystem(self) -> int:
        self.partition_start = 0
        if self.partition is None:
            if self.subpartition is not None:
                debug_print("[yellow]subpartition ignored without a partition[/yellow]")
            return 0

        first_sector = locate_partition(self.block_device, C.PARTITION_TABLE_OFFSET, self.partition)
        self.partition_start = first_sector * C.SECTOR_BYTES
        if self.subpartition is None:
            return self.partition_start

        # 子分区表在主分区自己的第一个扇区里，子分区的扇区号是相对整个镜像的
        table_address = self.partition_start + C.PARTITION_TABLE_OFFSET
        return locate_partition(self.block_device, table_address, self.subpartition) * C.SECTOR_BYTES

    def unmount(self):
        debug_print(f"Disk.unmount()")
        if not self.mounted:
            return
        self.block_device.close()
        self.mounted = False

    @property
    def fs_start(self) -> int:
        return self.block_device.fs_start

    def read_bytes(self, offset: int, length: int) -> bytes:
        return self.block_device.read(offset, length)

    def read_block(self, block_number: int) -> bytes:
        return self.block_device.read_block(block_number)

    def read_inode(self, inode_no: int) -> Inode:
        return Inode.from_index(inode_no, self)

    def get_file_block(self, inode: Inode, logical_block: int) -> int:
        return inode.peek_block(logical_block)

    def _dir_blocks(self, inode: Inode) -> Generator[DirBlock, None, None]:
        # 跳过空洞和读不出来的目录块
        for index in inode.block_list():
            if index == 0:
                continue
            try:
                yield DirBlock.from_index(index, self)
            except ImageReadError as e:
                debug_print(f"[yellow]directory block {index} unreadable, skipped:[/yellow] {e}")

    def _find_entry(self, inode: Inode, name: str) -> int:
        for dir_block in self._dir_blocks(inode):
            inode_no = dir_block.find(name)
            if inode_no != 0:
                return inode_no
        return 0

    def _read_inode_for_path(self, inode_no: int, path: str) -> Inode:
        try:
            return self.read_inode(inode_no)
        except (InvalidInode, ImageReadError) as e:
            debug_print(f"[red]inode {inode_no} unreadable:[/red] {e}")
            raise PathNotFound(path) from e

    def resolve(self, path: str) -> int:
        """
        路径 -> inode号
        只有最后一级可以不是目录
        """
        debug_print(f"Disk.resolve({path})")
        path = pathname.canonicalize(path)
        inode_no = C.INODE_ROOT_NO
        components = pathname.split_components(path)

        for position, name in enumerate(components):
            current = self._read_inode_for_path(inode_no, path)
            target_no = self._find_entry(current, name)
            if target_no == 0:
                raise PathNotFound(path)

            target = self._read_inode_for_path(target_no, path)
            if position < len(components) - 1 and not target.is_dir:
                raise NotADirectory(path)
            inode_no = target_no

        return inode_no

    def get_inode(self, path: str) -> Inode:
        return self._read_inode_for_path(self.resolve(path), path)

    def dir_entries(self, inode: Inode) -> Generator[tuple[int, str], None, None]:
        for dir_block in self._dir_blocks(inode):
            yield from dir_block.entries()

    def dir_list(self, path: str) -> list[str]:
        debug_print(f"Disk.dir_list({path})")
        inode = self.get_inode(path)
        if not inode.is_dir:
            raise NotADirectory(pathname.canonicalize(path))
        names = []
        for dir_block in self._dir_blocks(inode):
            names += dir_block.list()
        return names

    def iter_file(self, inode: Inode) -> Generator[bytes, None, None]:
        """
        按块返回文件内容，空洞补0，最后一块截断到文件大小
        """
        block_size = self.superblock.block_size
        remaining = inode.size
        for logical_block, index in enumerate(inode.block_list()):
            length = min(block_size, remaining)
            if index == 0:
                debug_print(f"[LBlock {logical_block}] Hole found. Writing {length} zeros.")
                chunk = b'\x00' * length
            else:
                debug_print(f"[LBlock {logical_block}] Disk Block {index} "
                            f"(Offset {self.fs_start + index * block_size}). Copying {length} bytes.")
                chunk = self.read_block(index)[:length]
            yield chunk
            remaining -= length

    def read_file(self, path: str, offset: int = 0, size: int = -1) -> bytes:
        debug_print(f"Disk.read_file({path}, {offset}, {size})")
        inode = self.get_inode(path)
        if not inode.is_regular:
            raise NotARegularFile(pathname.canonicalize(path))

        offset = max(offset, 0)
        if size < 0:
            size = inode.size - offset
        else:
            size = min(size, inode.size - offset)
        if size <= 0:
            return b""

        block_size = self.superblock.block_size
        start_block_index = offset // block_size
        position = offset % block_size

        result = b""
        for index in inode.block_list(start_block_index):
            block = self.read_block(index) if index != 0 else b'\x00' * block_size
            data = block[position : position + size]
            result += data
            position = 0
            size -= len(data)
            if size == 0:
                break

        return result

    def get_attr(self, path: str) -> FileStats:
        debug_print(f"Disk.get_attr({path})")
        inode = self.get_inode(path)
        return FileStats(
            st_mode=inode.mode,
            st_ino=inode.index,
            st_nlink=inode.data.i_nlinks,
            st_uid=inode.data.i_uid,
            st_gid=inode.data.i_gid,
            st_size=inode.size,
            st_atime=inode.data.i_atime,
            st_mtime=inode.data.i_mtime,
            st_ctime=inode.data.i_ctime,
        )

    def exists(self, path: str) -> bool:
        try:
            self.resolve(path)
        except (PathNotFound, NotADirectory):
            return False
        return True
