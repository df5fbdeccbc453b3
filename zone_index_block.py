from typing import TYPE_CHECKING
from errors import ImageReadError
from structures import ZoneIndexBlockStruct
from utils import debug_print

if TYPE_CHECKING:
    from disk import Disk


class ZoneIndexBlock:
    """
    间接块：一整块的zone号
    读不出来的间接块当作全0，对应的那一段文件就是空洞
    """
    def __init__(self, zone: int, indexes: list[int], disk: 'Disk'):
        self.zone = zone
        self.indexes = indexes
        self.disk = disk

    @classmethod
    def from_zone(cls, zone: int, disk: 'Disk'):
        """
        通过zone号构造索引对象
        """
        superblock = disk.superblock
        try:
            data = disk.read_bytes(zone * superblock.zone_size, superblock.block_size)
        except ImageReadError as e:
            debug_print(f"[yellow]indirect zone {zone} unreadable, treating as hole:[/yellow] {e}")
            return cls(zone, [0] * superblock.pointers_per_block, disk)
        return cls(zone, list(ZoneIndexBlockStruct(superblock.block_size).parse(data)), disk)

    def __getitem__(self, index: int) -> int:
        # 越界的下标也当作空洞
        if not 0 <= index < len(self.indexes):
            return 0
        return self.indexes[index]

    def subblock(self, index: int) -> 'ZoneIndexBlock | None':
        zone = self[index]
        if zone == 0:
            return None
        return ZoneIndexBlock.from_zone(zone, self.disk)
