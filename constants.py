# 是否输出调试信息（由 -v / -d 打开）
OUTPUT_LOG = False

# 分区表
SECTOR_BYTES = 512
PARTITION_TABLE_OFFSET = 0x1BE
PARTITION_ENTRY_BYTES = 16
PARTITION_COUNT = 4
BOOT_SIGNATURE = b'\x55\xaa'
MINIX_PARTITION_TYPE = 0x81

# 超级块
BOOT_BLOCK_BYTES = 1024
SUPERBLOCK_OFFSET = 1024
SUPERBLOCK_BYTES = 31
MINIX_MAGIC = 0x4D5A
# 引导块 + 超级块，之后是两张位图和inode表
INODE_TABLE_BLOCK_BASE = 2

# inode
INODE_BYTES = 64
INODE_ROOT_NO = 1
DIRECT_ZONES = 7
ZONE_POINTER_BYTES = 4

# 目录项
DIRECTORY_BYTES = 64
DIRECTORY_NAME_BYTES = 60

# i_mode
MODE_TYPE_MASK = 0o170000
MODE_REGULAR = 0o100000
MODE_DIRECTORY = 0o040000
