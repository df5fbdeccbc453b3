import constants as C
from block_device import ImageDevice
from disk import Disk
from inode import Inode
from partition import read_partition_table
from utils import stderr_console, timestr


def print_partition_table(device: ImageDevice, table_address: int, title: str) -> None:
    stderr_console.print(f"\n[bold]{title}[/bold] (table at 0x{table_address:x}):")
    stderr_console.print("       ----Start----      ------End-----")
    stderr_console.print("  Boot head  sec  cyl Type head  sec  cyl      First       Size")
    for entry in read_partition_table(device, table_address):
        stderr_console.print(f"  0x{entry.bootind:02x} {entry.start_head:4d} {entry.start_sec:4d} "
                             f"{entry.start_cyl:4d} 0x{entry.type:02x} {entry.end_head:4d} "
                             f"{entry.end_sec:4d} {entry.end_cyl:4d} {entry.lowsec:10d} {entry.size:10d}")


def print_partition_tables(disk: Disk) -> None:
    if disk.partition is None:
        return
    device = disk.block_device
    print_partition_table(device, C.PARTITION_TABLE_OFFSET, "Partition table")
    if disk.subpartition is not None:
        table_address = disk.partition_start + C.PARTITION_TABLE_OFFSET
        print_partition_table(device, table_address, "Subpartition table")


def print_superblock(disk: Disk) -> None:
    superblock = disk.superblock
    data = superblock.data
    stderr_console.print(f"\n[bold]Superblock Contents:[/bold]")
    stderr_console.print(f"  Image file        {disk.path}")
    stderr_console.print(f"  Partition         {disk.partition}, subpartition {disk.subpartition}")
    stderr_console.print(f"  FS start          {disk.fs_start} (sector {disk.fs_start // C.SECTOR_BYTES})")
    stderr_console.print("Stored Fields:")
    stderr_console.print(f"  ninodes      {data.s_ninodes:12d}")
    stderr_console.print(f"  i_blocks     {data.s_imap_blocks:12d}")
    stderr_console.print(f"  z_blocks     {data.s_zmap_blocks:12d}")
    stderr_console.print(f"  firstdata    {data.s_firstdatazone:12d}")
    stderr_console.print(f"  log_zone_size{data.s_log_zone_size:12d} (zone size: {superblock.zone_size})")
    stderr_console.print(f"  max_file     {data.s_max_size:12d}")
    stderr_console.print(f"  magic        {data.s_magic:#12x}")
    stderr_console.print(f"  zones        {data.s_zones:12d}")
    stderr_console.print(f"  blocksize    {data.s_block_size:12d}")
    stderr_console.print(f"  subversion   {data.s_disk_version:12d}")


def print_inode(inode: Inode) -> None:
    data = inode.data
    stderr_console.print(f"\n[bold]File inode #{inode.index}:[/bold]")
    stderr_console.print(f"  uint16_t mode       {data.i_mode:#10x} ({inode.permissions})")
    stderr_console.print(f"  uint16_t links      {data.i_nlinks:10d}")
    stderr_console.print(f"  uint16_t uid        {data.i_uid:10d}")
    stderr_console.print(f"  uint16_t gid        {data.i_gid:10d}")
    stderr_console.print(f"  uint32_t size       {data.i_size:10d}")
    stderr_console.print(f"  uint32_t atime      {data.i_atime:10d} --- {timestr(data.i_atime)}")
    stderr_console.print(f"  uint32_t mtime      {data.i_mtime:10d} --- {timestr(data.i_mtime)}")
    stderr_console.print(f"  uint32_t ctime      {data.i_ctime:10d} --- {timestr(data.i_ctime)}")
    stderr_console.print("\n  Direct zones:")
    for index, zone in enumerate(data.i_zone):
        stderr_console.print(f"              zone[{index}]   = {zone:10d}")
    stderr_console.print(f"  uint32_t  indirect   = {data.i_indirect:10d}")
    stderr_console.print(f"  uint32_t  double     = {data.i_double_indirect:10d}")
