"""Root test configuration: isolated environment and a sample Joplin export"""

import os
from pathlib import Path

import pytest


NOTE = """\
---
title: {title}
created: 2024-03-07T23:22:26Z
updated: 2024-04-07T08:34:52Z
---

{body}
"""


@pytest.fixture(autouse=True)
def clear_jb_env(monkeypatch):
    """Keep JB_* variables from the developer shell out of every test."""
    for name in list(os.environ):
        if name.startswith("JB_"):
            monkeypatch.delenv(name)


@pytest.fixture(name="joplin_export")
def joplin_export_fixture(tmp_path) -> Path:
    """A small Joplin export: two notebooks, one nested note, and attachments."""
    root = tmp_path / "joplin"
    (root / "Work Notes").mkdir(parents=True)
    (root / "Personal" / "Trips").mkdir(parents=True)
    (root / "_resources").mkdir()

    (root / "inbox.md").write_text(NOTE.format(title="Inbox", body="Top level"), encoding="utf-8")
    (root / "Work Notes" / "meeting notes.md").write_text(
        NOTE.format(title="Meeting", body="Agenda"), encoding="utf-8"
    )
    (root / "Personal" / "Trips" / "Rome.MD").write_text(
        NOTE.format(title="Rome", body="Colosseum"), encoding="utf-8"
    )
    (root / "Personal" / "todo.txt").write_text("not a note", encoding="utf-8")
    (root / "_resources" / "image.png").write_bytes(b"\x89PNG\r\n")
    return root
