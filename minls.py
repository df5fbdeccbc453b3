#!/usr/bin/env python
import sys
from docopt import docopt

import cli
import pathname
import report
from errors import ImageReadError, InvalidInode
from utils import listing_line, stderr_console

doc = """
List a file or directory in a MINIX v3 filesystem image.

Usage:
    minls [-v] [-p <part> [-s <subpart>]] <imagefile> [<path>]
    minls (-h | --help)

Options:
    -h, --help     Print usage information and exit.
    -v, --verbose  Print partition table(s), superblock and source inode to stderr.
    -p <part>      Select primary partition for the filesystem (0-3).
    -s <subpart>   Select subpartition for the filesystem (0-3).
"""


def list_path(args: dict) -> int:
    path = pathname.canonicalize(args['<path>'] or pathname.ROOT)
    with cli.open_disk(args) as disk:
        if args['--verbose']:
            cli.print_verbose_filesystem(disk)

        inode = disk.get_inode(path)
        if args['--verbose']:
            report.print_inode(inode)

        if not inode.is_dir:
            print(listing_line(inode.mode, inode.size, pathname.basename(path)))
            return 0

        print(f"{path}:")
        for inode_no, name in disk.dir_entries(inode):
            try:
                entry = disk.read_inode(inode_no)
            except (InvalidInode, ImageReadError) as e:
                stderr_console.print(f"minls: Could not read inode {inode_no} for entry {name}: {e}", markup=False)
                continue
            print(listing_line(entry.mode, entry.size, name))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = docopt(doc, argv)
    return cli.run('minls', lambda: list_path(args))


if __name__ == '__main__':
    sys.exit(main())
