import errno
import os


class MinixError(Exception):
    """
    所有读取MINIX镜像时产生的错误的基类
    """


class ImageReadError(MinixError, OSError):
    pass


class BadMagic(MinixError):
    pass


class PartitionError(MinixError):
    pass


class NotMinixPartition(PartitionError):
    pass


class PartitionOutOfRange(PartitionError):
    pass


class InvalidInode(MinixError):
    def __init__(self, inode_no: int, ninodes: int):
        super().__init__(f"Invalid inode number {inode_no} (filesystem has {ninodes} inodes)")
        self.inode_no = inode_no


class PathNotFound(MinixError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), path)

    def __str__(self):
        return f"Can't find {self.filename}"


class NotADirectory(MinixError, NotADirectoryError):
    def __init__(self, path: str):
        super().__init__(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

    def __str__(self):
        return f"Not a directory: {self.filename}"


class NotARegularFile(MinixError):
    def __init__(self, path: str):
        super().__init__(f"{path} is not a regular file")
        self.path = path
