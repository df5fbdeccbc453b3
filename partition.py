from construct import Container
import constants as C
from block_device import ImageDevice
from errors import BadMagic, NotMinixPartition, PartitionOutOfRange
from structures import BootRecordStruct
from utils import debug_print


def read_partition_table(device: ImageDevice, table_address: int) -> list[Container]:
    """
    读取 table_address 所在的引导扇区，校验魔数后返回4个分区表项
    table_address 是分区表本身（不是扇区）在镜像里的绝对位置
    """
    sector_start = table_address - C.PARTITION_TABLE_OFFSET
    boot_record = BootRecordStruct.parse(device.read_absolute(sector_start, C.SECTOR_BYTES))
    if boot_record.signature != C.BOOT_SIGNATURE:
        raise BadMagic(f"Partition table with bad magic: 0x{boot_record.signature.hex()}")
    return list(boot_record.partitions)


def locate_partition(device: ImageDevice, table_address: int, index: int) -> int:
    """
    返回分区的起始扇区号（LBA）
    """
    partitions = read_partition_table(device, table_address)
    if not 0 <= index < C.PARTITION_COUNT:
        raise PartitionOutOfRange(f"Partition number {index} is out of range (0-{C.PARTITION_COUNT - 1})")

    entry = partitions[index]
    if entry.type != C.MINIX_PARTITION_TYPE:
        raise NotMinixPartition(f"Partition {index} is type 0x{entry.type:02x}, not a MINIX partition (0x81)")

    debug_print(f"partition {index} at table 0x{table_address:x}: first sector {entry.lowsec}, {entry.size} sectors")
    return entry.lowsec
