"""Write-back of Bear-ready notes and copying of attachment resources"""

import logging
import os
import shutil
import sys
from datetime import datetime
from pathlib import Path

from joplin2bear.core.errors import ResourcesNotFoundError, WriteError
from joplin2bear.core.models import Document

if sys.platform == 'win32':
    from win32_setctime import setctime


logger = logging.getLogger(__name__)

RESOURCES_DIR = '_resources'


def render_note(doc: Document) -> str:
    """Return the note body followed by its tag line, if any."""
    content = f"{doc.body}\n"
    if doc.tags is not None:
        content += f"\n{doc.tags}\n"
    return content


def set_file_times(path: Path, created: datetime, updated: datetime, platform: str = sys.platform) -> None:
    """Stamp path with created/updated in whole seconds.

    Access and modification times always come from updated. Creation time is
    set on Windows through setctime, and on macOS by first moving the
    modification time back to created, which pulls the birth time with it.
    Elsewhere the filesystem keeps its own creation time.
    """
    created_ts = int(created.timestamp())
    updated_ts = int(updated.timestamp())
    if platform == 'win32':
        setctime(path, created_ts)
    elif platform == 'darwin':
        os.utime(path, (created_ts, created_ts))
    os.utime(path, (updated_ts, updated_ts))


def write_note(doc: Document, target_dir: Path) -> Path:
    """Write one note under target_dir, mirroring its relative path, then stamp its times."""
    target = Path(target_dir) / doc.relative_path
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_note(doc), encoding='utf-8')
        set_file_times(target, doc.created, doc.updated)
    except OSError as e:
        raise WriteError(target, e) from e
    return target


def write_notes(docs: list[Document], target_dir: Path) -> list[Path]:
    """Write every document under target_dir. Returns the written paths in order."""
    written = []
    for doc in docs:
        path = write_note(doc, target_dir)
        logger.debug("Wrote %s", path)
        written.append(path)
    logger.info("Wrote %d note(s) to %s", len(written), target_dir)
    return written


def copy_resources(source_dir: Path, target_dir: Path, name: str = RESOURCES_DIR) -> Path:
    """Recursively copy source_dir/name into target_dir/name. Returns the target directory."""
    source = Path(source_dir) / name
    target = Path(target_dir) / name

    if not source.exists():
        raise ResourcesNotFoundError(f"The source path: {source} does not exist", source)
    if not source.is_dir():
        raise ResourcesNotFoundError(f"The source path: {source} is not a directory", source)

    try:
        shutil.copytree(source, target, dirs_exist_ok=True)
    except OSError as e:
        raise WriteError(target, e) from e
    logger.info("Copied resources %s -> %s", source, target)
    return target
