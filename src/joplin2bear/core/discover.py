"""Note file discovery and reading under a Joplin export root"""

import logging
from pathlib import Path

from joplin2bear.core.errors import (
    BuildError,
    DocumentBuildFailedError,
    ReadError,
    SourceDirectoryError,
)
from joplin2bear.core.models import Document
from joplin2bear.core.parse import build_document


logger = logging.getLogger(__name__)

NOTE_SUFFIX = '.md'


def discover_files(root: Path) -> list[Path]:
    """Return sorted absolute paths of every .md file under root, matched case-insensitively."""
    root = Path(root).resolve()
    if not root.exists():
        raise SourceDirectoryError(f"The path {root} does not exist", root)
    if not root.is_dir():
        raise SourceDirectoryError(f"The path {root} is not a directory", root)
    return sorted(
        p for p in root.rglob('*')
        if p.is_file() and p.suffix.lower() == NOTE_SUFFIX
    )


def read_document(root: Path, path: Path) -> Document:
    """Read one note and build it with its path relative to root."""
    relative = path.relative_to(root)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e
    try:
        return build_document(relative, text)
    except BuildError as e:
        raise DocumentBuildFailedError(relative, e) from e


def load_documents(source_dir: Path) -> list[Document]:
    """Build every note under source_dir; the first failing note aborts the whole load."""
    root = Path(source_dir).resolve()
    paths = discover_files(root)
    logger.info("Found %d note(s) under %s", len(paths), root)

    documents = []
    for path in paths:
        doc = read_document(root, path)
        logger.debug("Built %s (tags=%s)", doc.relative_path, doc.tags)
        documents.append(doc)
    return documents
