import os
from errors import ImageReadError
from utils import debug_print


class ImageDevice:
    """
    对镜像文件的只读访问
    所有读操作都会先做一次绝对定位，所以调用之间不依赖文件指针的位置
    fs_start 是文件系统在镜像里的起始字节，read() 的偏移都相对于它
    """
    def __init__(self, path_to_image: str):
        self.path_to_image = path_to_image
        try:
            self.image_file = open(path_to_image, "rb")
        except OSError as e:
            raise ImageReadError(f"Error opening image file {path_to_image}: {e.strerror}") from e
        self.image_size = os.fstat(self.image_file.fileno()).st_size
        self.fs_start = 0
        self.block_size = 0

    def read_absolute(self, offset: int, length: int) -> bytes:
        if offset < 0:
            raise ImageReadError(f"seek to offset {offset} failed")
        try:
            self.image_file.seek(offset)
            data = self.image_file.read(length)
        except (OSError, ValueError) as e:
            raise ImageReadError(f"read of {length} bytes at offset {offset} failed: {e}") from e
        if len(data) != length:
            debug_print(f"[red]short read[/red] at offset {offset}: {len(data)} of {length} bytes")
            raise ImageReadError(f"read of {length} bytes at offset {offset} failed")
        return data

    def read(self, offset: int, length: int) -> bytes:
        return self.read_absolute(self.fs_start + offset, length)

    def read_block(self, block_number: int) -> bytes:
        if self.block_size <= 0:
            raise ImageReadError(f"cannot read block {block_number} before the block size is known")
        return self.read(block_number * self.block_size, self.block_size)

    def close(self) -> None:
        if not self.image_file.closed:
            self.image_file.close()

    @property
    def closed(self) -> bool:
        return self.image_file.closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
