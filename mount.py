#!/usr/bin/env python
import errno
import functools
import os

from fuse import FUSE, FuseOSError, Operations

from disk import Disk
from errors import ImageReadError, NotADirectory, NotARegularFile, PathNotFound
from cli import partition_number
from utils import debug_print

from docopt import docopt
import constants as C

doc = """
Mount a MINIX v3 filesystem image read-only.

Usage:
    mount.py <image_path> <mountpoint> [-p <part> [-s <subpart>]] [-d | --debug]
    mount.py (-h | --help)

Options:
    -h, --help     Show this screen.
    -d, --debug    Show debug information (and run in foreground).
    -p <part>      Select primary partition for the filesystem (0-3).
    -s <subpart>   Select subpartition for the filesystem (0-3).
"""


def fuse_errors(method):
    """
    把读取镜像时的异常换成对应的errno
    """
    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except PathNotFound:
            raise FuseOSError(errno.ENOENT)
        except NotADirectory:
            raise FuseOSError(errno.ENOTDIR)
        except NotARegularFile:
            raise FuseOSError(errno.EISDIR)
        except ImageReadError:
            raise FuseOSError(errno.EIO)
    return wrapper


class MinixFS(Operations):
    def __init__(self, image_path, debug, partition=None, subpartition=None):
        self.image_path = image_path
        C.OUTPUT_LOG = debug
        self.disk = Disk(image_path, partition, subpartition)
        self.disk.mount()

    # Filesystem methods
    # ==================

    def destroy(self, path=None):
        debug_print("Calling [bold green]fsdestroy[/bold green]")
        self.disk.unmount()

    def access(self, path, mode):
        debug_print("Calling [bold green]access[/bold green] with path:", path, "and mode:", mode)
        if mode & os.W_OK:
            raise FuseOSError(errno.EROFS)
        return 0

    @fuse_errors
    def getattr(self, path, fh=None):
        debug_print("Calling [bold green]getattr[/bold green] with path:", path)
        return dict(self.disk.get_attr(path).items())

    @fuse_errors
    def readdir(self, path, fh):
        debug_print("Calling [bold green]readdir[/bold green] with path:", path)
        return self.disk.dir_list(path)

    def statfs(self, path):
        debug_print("Calling [bold green]statfs[/bold green]")
        superblock = self.disk.superblock
        return dict(
            f_bsize=superblock.block_size,
            f_frsize=superblock.block_size,
            f_blocks=superblock.data.s_zones * superblock.blocks_per_zone,
            f_bfree=0,
            f_bavail=0,
            f_files=superblock.ninodes,
            f_ffree=0,
            f_favail=0,
            f_flag=os.ST_RDONLY,
            f_namemax=C.DIRECTORY_NAME_BYTES,
        )

    # 只读文件系统，所有修改操作都拒绝
    def chmod(self, path, mode):
        raise FuseOSError(errno.EROFS)

    def chown(self, path, uid, gid):
        raise FuseOSError(errno.EROFS)

    def mknod(self, path, mode, dev):
        raise FuseOSError(errno.EROFS)

    def mkdir(self, path, mode):
        raise FuseOSError(errno.EROFS)

    def rmdir(self, path):
        raise FuseOSError(errno.EROFS)

    def unlink(self, path):
        raise FuseOSError(errno.EROFS)

    def symlink(self, name, target):
        raise FuseOSError(errno.EROFS)

    def rename(self, old, new):
        raise FuseOSError(errno.EROFS)

    def link(self, target, name):
        raise FuseOSError(errno.EROFS)

    def utimens(self, path, times=None):
        raise FuseOSError(errno.EROFS)

    # File methods
    # ============

    @fuse_errors
    def open(self, path, flags):
        debug_print("Calling [bold green]open[/bold green] with path:", path, "and flags:", flags)
        if flags & (os.O_WRONLY | os.O_RDWR | os.O_APPEND | os.O_TRUNC):
            raise FuseOSError(errno.EROFS)
        self.disk.resolve(path)
        return 0

    def create(self, path, mode, fi=None):
        raise FuseOSError(errno.EROFS)

    @fuse_errors
    def read(self, path, length, offset, fh):
        debug_print("Calling [bold green]read[/bold green] with path:", path, "length:", length, "and offset:", offset)
        return self.disk.read_file(path, offset, length)

    def write(self, path, buf, offset, fh):
        raise FuseOSError(errno.EROFS)

    def truncate(self, path, length, fh=None):
        raise FuseOSError(errno.EROFS)


def main(argv=None):
    args = docopt(doc, argv)
    operations = MinixFS(args['<image_path>'], args['--debug'],
                         partition_number(args['-p']), partition_number(args['-s']))
    FUSE(operations, args['<mountpoint>'], nothreads=True, foreground=args['--debug'], ro=True)


if __name__ == '__main__':
    main()
