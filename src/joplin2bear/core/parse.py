"""Front matter location, field extraction, and Document building"""

from pathlib import Path, PurePath
from typing import Optional

from joplin2bear.core.errors import (
    MissingCreatedError,
    MissingEndMarkerError,
    MissingFrontMatterSliceError,
    MissingStartMarkerError,
    MissingTitleError,
    MissingUpdatedError,
)
from joplin2bear.core.models import Document
from joplin2bear.core.utils.dates import parse_timestamp
from joplin2bear.core.utils.tags import derive_tags


MARKER = '---\n'

TITLE_KEY = 'title:'
CREATED_KEY = 'created:'
UPDATED_KEY = 'updated:'


def find_front_matter_start(text: str) -> Optional[int]:
    """Return the offset of the first marker, else None."""
    pos = text.find(MARKER)
    return pos if pos >= 0 else None


def find_front_matter_end(start: int, text: str) -> Optional[int]:
    """Return the offset just past the marker that closes the block opened at start."""
    after_start = start + len(MARKER)
    pos = text.find(MARKER, after_start)
    if pos < 0:
        return None
    end = pos + len(MARKER)
    return end if end <= len(text) else None


def locate_front_matter(text: str) -> tuple[int, int]:
    """Return (start, end) offsets of the front matter block, markers included."""
    start = find_front_matter_start(text)
    if start is None:
        raise MissingStartMarkerError()
    end = find_front_matter_end(start, text)
    if end is None:
        raise MissingEndMarkerError()
    return start, end


def slice_front_matter(text: str, start: int, end: int) -> str:
    """Return text[start:end], or raise if the offsets do not fit inside text.

    locate_front_matter only yields fitting offsets, so this guards against
    offsets that did not come from it.
    """
    if not 0 <= start < end <= len(text):
        raise MissingFrontMatterSliceError()
    return text[start:end]


def extract_field(front_matter: str, key: str) -> Optional[str]:
    """Return the first non-blank value of a 'key:' line, else None.

    The stripped line must start with key. A blank value counts as absent.
    """
    for line in front_matter.split('\n'):
        line = line.strip()
        if not line.startswith(key):
            continue
        value = line[len(key):].lstrip()
        if value:
            return value
    return None


def build_document(relative_path: PurePath | str, text: str) -> Document:
    """Parse raw note text into a Document, raising the first BuildError hit."""
    start, end = locate_front_matter(text)

    front_matter = slice_front_matter(text, start, end)
    body = text[end:].strip()

    title = extract_field(front_matter, TITLE_KEY)
    if title is None:
        raise MissingTitleError()

    created = extract_field(front_matter, CREATED_KEY)
    if created is None:
        raise MissingCreatedError()
    created_at = parse_timestamp(created, 'created')

    updated = extract_field(front_matter, UPDATED_KEY)
    if updated is None:
        raise MissingUpdatedError()
    updated_at = parse_timestamp(updated, 'updated')

    return Document(
        title=title,
        created=created_at,
        updated=updated_at,
        front_matter=front_matter,
        front_matter_start_pos=start,
        front_matter_end_pos=end,
        body=body,
        tags=derive_tags(relative_path),
        relative_path=Path(relative_path),
    )
