"""Integration tests for core/pipeline.py"""

import os
from datetime import datetime, timezone

import pytest

from joplin2bear.core.errors import DocumentBuildFailedError, ResourcesNotFoundError
from joplin2bear.core.pipeline import run_check, run_migrate


UPDATED = datetime(2024, 4, 7, 8, 34, 52, tzinfo=timezone.utc).timestamp()


def test_run_migrate_writes_bear_layout(joplin_export, tmp_path):
    """Notes are mirrored under the target with tag lines, times, and resources."""
    target = tmp_path / "bear"
    result = run_migrate(joplin_export, target)

    assert len(result.documents) == 3
    assert sorted(p.relative_to(target).as_posix() for p in result.written) == [
        "Personal/Trips/Rome.MD",
        "Work Notes/meeting notes.md",
        "inbox.md",
    ]

    meeting = target / "Work Notes" / "meeting notes.md"
    assert os.stat(meeting).st_mtime == UPDATED
    assert meeting.read_text(encoding="utf-8") == "Agenda\n\n#Work-Notes/meeting-notes\n"
    assert (target / "inbox.md").read_text(encoding="utf-8") == "Top level\n\n#inbox\n"
    assert not (target / "Personal" / "todo.txt").exists()

    assert result.resources == target / "_resources"
    assert (target / "_resources" / "image.png").exists()


def test_run_migrate_build_error_writes_nothing(joplin_export, tmp_path):
    """One bad note aborts the run before any file is written."""
    (joplin_export / "zz bad.md").write_text(
        "---\ntitle: Bad\ncreated: 2024-03-07T23:22:26\nupdated: 2024-04-07T08:34:52Z\n---\n",
        encoding="utf-8",
    )
    target = tmp_path / "bear"
    with pytest.raises(DocumentBuildFailedError, match="zz bad.md"):
        run_migrate(joplin_export, target)
    assert not target.exists()


def test_run_migrate_missing_resources(joplin_export, tmp_path):
    (joplin_export / "_resources" / "image.png").unlink()
    (joplin_export / "_resources").rmdir()
    with pytest.raises(ResourcesNotFoundError):
        run_migrate(joplin_export, tmp_path / "bear")


def test_run_migrate_without_resources(joplin_export, tmp_path):
    target = tmp_path / "bear"
    result = run_migrate(joplin_export, target, with_resources=False)
    assert result.resources is None
    assert not (target / "_resources").exists()
    assert len(result.written) == 3


def test_run_check_writes_nothing(joplin_export, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    docs = run_check(joplin_export)
    assert {d.title for d in docs} == {"Inbox", "Meeting", "Rome"}
    assert list(tmp_path.iterdir()) == [joplin_export]
