from construct import Container
import constants as C
from block_device import ImageDevice
from errors import BadMagic
from structures import SuperBlockStruct
from utils import debug_print


class Superblock:
    def __init__(self, data: Container):
        self.data = data

    @classmethod
    def load(cls, device: ImageDevice):
        """
        从文件系统起始处偏移1024字节读入超级块，并校验魔数
        """
        data = SuperBlockStruct.parse(device.read(C.SUPERBLOCK_OFFSET, C.SUPERBLOCK_BYTES))
        if data.s_magic != C.MINIX_MAGIC:
            raise BadMagic(f"Bad magic number. (0x{data.s_magic & 0xffff:04x}) "
                           "This doesn't look like a MINIX filesystem.")
        superblock = cls(data)
        if superblock.block_size < C.DIRECTORY_BYTES or superblock.log_zone_size < 0:
            raise BadMagic(f"Bad superblock geometry: block size {superblock.block_size}, "
                           f"log_zone_size {superblock.log_zone_size}")
        if superblock.log_zone_size != 0:
            # 只验证过一个zone等于一个块的镜像
            debug_print(f"[yellow]warning:[/yellow] log_zone_size is {superblock.log_zone_size}, "
                        "multi-block zones are unverified")
        return superblock

    @property
    def ninodes(self) -> int:
        return self.data.s_ninodes

    @property
    def block_size(self) -> int:
        return self.data.s_block_size

    @property
    def log_zone_size(self) -> int:
        return self.data.s_log_zone_size

    @property
    def blocks_per_zone(self) -> int:
        return 1 << self.log_zone_size

    @property
    def zone_size(self) -> int:
        return self.block_size * self.blocks_per_zone

    @property
    def pointers_per_block(self) -> int:
        return self.block_size // C.ZONE_POINTER_BYTES

    @property
    def inode_table_offset(self) -> int:
        # 引导块、超级块、inode位图、zone位图之后就是inode表
        blocks = C.INODE_TABLE_BLOCK_BASE + self.data.s_imap_blocks + self.data.s_zmap_blocks
        return blocks * self.block_size

    def inode_offset(self, inode_no: int) -> int:
        return self.inode_table_offset + (inode_no - 1) * C.INODE_BYTES
