"""Shared fixtures for core unit tests"""

import pytest


FRONT_MATTER = """\
---
title: Test
created: 2024-03-07T23:22:26Z
updated: 2024-04-07T08:34:52Z
---
"""


@pytest.fixture(name="front_matter")
def front_matter_fixture() -> str:
    return FRONT_MATTER


@pytest.fixture(name="note_text")
def note_text_fixture() -> str:
    return FRONT_MATTER + "\n\nThe content\n"
