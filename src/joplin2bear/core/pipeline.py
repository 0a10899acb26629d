"""Pipeline step functions: check and migrate orchestration"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from joplin2bear.core.discover import load_documents
from joplin2bear.core.export import RESOURCES_DIR, copy_resources, write_notes
from joplin2bear.core.models import Document


logger = logging.getLogger(__name__)


@dataclass
class MigrationResult:
    """Outcome of a migration run."""
    documents: list[Document]
    written:   list[Path] = field(default_factory=list)
    resources: Optional[Path] = None     # None when resource copying was skipped


def run_check(source_dir: Path) -> list[Document]:
    """Build every note under source_dir without writing anything."""
    return load_documents(Path(source_dir))


def run_migrate(
    source_dir: Path,
    target_dir: Path,
    resources_dir: str = RESOURCES_DIR,
    with_resources: bool = True,
    ) -> MigrationResult:
    """Build all notes, then write them, then copy resources.

    Every note is built before the first write, so a failing note leaves
    target_dir untouched.
    """
    source_dir, target_dir = Path(source_dir), Path(target_dir)
    documents = load_documents(source_dir)
    written = write_notes(documents, target_dir)

    resources = None
    if with_resources:
        resources = copy_resources(source_dir, target_dir, resources_dir)
    else:
        logger.info("Skipping resource copy")
    return MigrationResult(documents=documents, written=written, resources=resources)
