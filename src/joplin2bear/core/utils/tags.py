"""Hierarchical tag derivation from a note's relative path"""

from pathlib import PurePath
from typing import Optional


NOTE_SUFFIX = '.md'


def derive_tags(relative_path: PurePath | str) -> Optional[str]:
    """Return '#dir/sub/name' for a relative path, or None if it has no segments.

    Spaces become hyphens in every segment; only the final segment loses a
    trailing '.md'. Nothing else is escaped.
    """
    parts = PurePath(relative_path).parts
    if not parts:
        return None

    *dirs, name = (part.replace(' ', '-') for part in parts)
    name = name.removesuffix(NOTE_SUFFIX)
    return '#' + ''.join(f'{d}/' for d in dirs) + name
