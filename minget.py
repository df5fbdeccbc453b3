#!/usr/bin/env python
import sys
from typing import BinaryIO
from docopt import docopt

import cli
import pathname
import report
from disk import Disk
from errors import NotARegularFile
from inode import Inode
from utils import debug_print

doc = """
Copy a regular file out of a MINIX v3 filesystem image.

Usage:
    minget [-v] [-p <part> [-s <subpart>]] <imagefile> <srcpath> [<dstpath>]
    minget (-h | --help)

Options:
    -h, --help     Print usage information and exit.
    -v, --verbose  Print partition table(s), superblock and source inode to stderr.
    -p <part>      Select primary partition for the filesystem (0-3).
    -s <subpart>   Select subpartition for the filesystem (0-3).

Without <dstpath> the file is written to standard output.
"""


def copy_file(disk: Disk, inode: Inode, sink: BinaryIO) -> int:
    """
    把文件的全部内容写到 sink，返回写入的字节数
    """
    debug_print(f"Starting copy. File size: {inode.size} bytes. Block size: {disk.superblock.block_size}.")
    written = 0
    for chunk in disk.iter_file(inode):
        sink.write(chunk)
        written += len(chunk)
    return written


def get_file(args: dict) -> int:
    path = pathname.canonicalize(args['<srcpath>'])
    with cli.open_disk(args) as disk:
        if args['--verbose']:
            cli.print_verbose_filesystem(disk)

        inode = disk.get_inode(path)
        if not inode.is_regular:
            raise NotARegularFile(path)
        if args['--verbose']:
            report.print_inode(inode)

        if args['<dstpath>'] is None:
            copy_file(disk, inode, sys.stdout.buffer)
            sys.stdout.buffer.flush()
        else:
            with open(args['<dstpath>'], 'wb') as sink:
                copy_file(disk, inode, sink)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = docopt(doc, argv)
    return cli.run('minget', lambda: get_file(args))


if __name__ == '__main__':
    sys.exit(main())
