import constants as C
from datetime import datetime
from rich.console import Console

stderr_console = Console(stderr=True, highlight=False, soft_wrap=True)


def debug_print(*args, **kwargs) -> None:
    if C.OUTPUT_LOG:
        stderr_console.print(*args, **kwargs)


def timestr(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp).strftime('%Y-%m-%d %H:%M:%S')


def is_directory(mode: int) -> bool:
    return mode & C.MODE_TYPE_MASK == C.MODE_DIRECTORY


def is_regular_file(mode: int) -> bool:
    return mode & C.MODE_TYPE_MASK == C.MODE_REGULAR


def permissions_string(mode: int) -> str:
    """
    生成类似 ls -l 的10位权限字符串，例如 drwxr-xr-x
    """
    result = 'd' if is_directory(mode) else '-'
    for shift in (6, 3, 0):
        bits = (mode >> shift) & 0o7
        result += 'r' if bits & 0o4 else '-'
        result += 'w' if bits & 0o2 else '-'
        result += 'x' if bits & 0o1 else '-'
    return result


def listing_line(mode: int, size: int, name: str) -> str:
    return f"{permissions_string(mode)} {size:9d} {name}"
