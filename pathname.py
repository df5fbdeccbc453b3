SEPARATOR = '/'
ROOT = '/'


def split_components(path: str) -> list[str]:
    """
    把路径拆成各级名字，重复的分隔符不会产生空名字，根目录返回空列表
    """
    return [part for part in path.split(SEPARATOR) if part]


def canonicalize(path: str) -> str:
    """
    合并重复的 /，保证只有一个开头的 /，去掉结尾的 /（根目录除外）
    空路径就是根目录
    """
    return ROOT + SEPARATOR.join(split_components(path))


def basename(canonical_path: str) -> str:
    """
    列目录时显示用的名字，根目录显示为 .
    """
    if canonical_path == ROOT:
        return '.'
    return canonical_path.rsplit(SEPARATOR, 1)[1]


def join(parent: str, name: str) -> str:
    return canonicalize(parent + SEPARATOR + name)
