import sys
from typing import Callable
from docopt import DocoptExit
import constants as C
from disk import Disk
from errors import MinixError
import report
from utils import stderr_console


def partition_number(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise DocoptExit(f"invalid partition number: {value}")


def open_disk(args: dict) -> Disk:
    """
    按命令行参数打开镜像，-v 时同时打开调试输出
    """
    C.OUTPUT_LOG = bool(args['--verbose'])
    return Disk(args['<imagefile>'],
                partition_number(args['-p']),
                partition_number(args['-s']))


def print_verbose_filesystem(disk: Disk) -> None:
    report.print_partition_tables(disk)
    report.print_superblock(disk)


def run(prog: str, command: Callable[[], int]) -> int:
    """
    执行命令，出错时打印一行错误信息并返回1
    """
    try:
        return command()
    except (MinixError, OSError) as e:
        stderr_console.print(f"{prog}: {e}", markup=False)
        return 1
    finally:
        sys.stdout.flush()
