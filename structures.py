from construct import Struct, Int8ul, Int16ul, Int16sl, Int32ul, Int32sl, Array, Bytes, Padding
import constants as C

# 分区表项
PartitionEntryStruct = Struct(
    "bootind" / Int8ul,
    "start_head" / Int8ul,
    "start_sec" / Int8ul,
    "start_cyl" / Int8ul,
    "type" / Int8ul,
    "end_head" / Int8ul,
    "end_sec" / Int8ul,
    "end_cyl" / Int8ul,
    "lowsec" / Int32ul,
    "size" / Int32ul,
)
assert PartitionEntryStruct.sizeof() == C.PARTITION_ENTRY_BYTES

# 引导扇区（MBR）
BootRecordStruct = Struct(
    "boot_code" / Bytes(C.PARTITION_TABLE_OFFSET),
    "partitions" / Array(C.PARTITION_COUNT, PartitionEntryStruct),
    "signature" / Bytes(2),
)
assert BootRecordStruct.sizeof() == C.SECTOR_BYTES

# 超级块（MINIX v3）
SuperBlockStruct = Struct(
    "s_ninodes" / Int32ul,
    Padding(2),
    "s_imap_blocks" / Int16sl,
    "s_zmap_blocks" / Int16sl,
    "s_firstdatazone" / Int16ul,
    "s_log_zone_size" / Int16sl,
    Padding(2),
    "s_max_size" / Int32ul,
    "s_zones" / Int32ul,
    "s_magic" / Int16sl,
    Padding(2),
    "s_block_size" / Int16ul,
    "s_disk_version" / Int8ul,
)
assert SuperBlockStruct.sizeof() == C.SUPERBLOCK_BYTES

# inode
InodeStruct = Struct(
    "i_mode" / Int16ul,
    "i_nlinks" / Int16ul,
    "i_uid" / Int16ul,
    "i_gid" / Int16ul,
    "i_size" / Int32ul,

    "i_atime" / Int32sl,
    "i_mtime" / Int32sl,
    "i_ctime" / Int32sl,

    "i_zone" / Int32ul[C.DIRECT_ZONES],
    "i_indirect" / Int32ul,
    "i_double_indirect" / Int32ul,
    Padding(4),
)
assert InodeStruct.sizeof() == C.INODE_BYTES

# 目录项，名字不一定以0结尾，所以保留原始字节
DirectoryStruct = Struct(
    "d_ino" / Int32ul,
    "d_name" / Bytes(C.DIRECTORY_NAME_BYTES),
)
assert DirectoryStruct.sizeof() == C.DIRECTORY_BYTES


# 下面两种块的长度取决于超级块里的块大小
def DirectoryBlockStruct(block_size: int):
    return Array(block_size // C.DIRECTORY_BYTES, DirectoryStruct)


def ZoneIndexBlockStruct(block_size: int):
    return Array(block_size // C.ZONE_POINTER_BYTES, Int32ul)
