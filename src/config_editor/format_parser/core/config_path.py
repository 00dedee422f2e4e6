import re
from typing import List, Sequence, Union

PathSegment = Union[str, int]
PathLike = Union[str, Sequence[PathSegment]]

# "rules[2]", "matrix[0][1]"
PATH_INDEX_PATTERN = re.compile(r'^(.*?)((?:\[\d+\])+)$')

def join_key(parent: str, key: str) -> str:
    """Append a map key to a path"""
    return f"{parent}.{key}" if parent else key

def join_index(parent: str, index: int) -> str:
    """Append an array index to a path"""
    return f"{parent}[{index}]"

def format_path(segments: Sequence[PathSegment]) -> str:
    """Render path segments as a dotted/bracketed path string"""
    path = ""
    for segment in segments:
        if isinstance(segment, int):
            path = join_index(path, segment)
        else:
            path = join_key(path, segment)
    return path

def split_path(path: PathLike) -> List[PathSegment]:
    """Split a path string into key and index segments.

    Sequences are returned as a list unchanged. Keys containing dots can only
    be addressed through the sequence form.
    """
    if not isinstance(path, str):
        return list(path)
    if not path:
        return []

    segments: List[PathSegment] = []
    for part in path.split('.'):
        match = PATH_INDEX_PATTERN.match(part)
        if not match:
            segments.append(part)
            continue
        key, indexes = match.group(1), match.group(2)
        if key:
            segments.append(key)
        segments.extend(int(i) for i in indexes[1:-1].split(']['))
    return segments
