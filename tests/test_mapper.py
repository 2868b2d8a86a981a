import os

import pytest

from dendron2logseq.hierarchy import ConfigurationError
from dendron2logseq.mapper import destination_path, journal_path, page_path
from dendron2logseq.vault import VaultBinding

WITH_JOURNAL = VaultBinding("/v", "/g", "daily")
WITHOUT_JOURNAL = VaultBinding("/v", "/g", None)


def p(*parts):
    return os.path.join(*parts)


def test_journal_note():
    assert destination_path("/v/daily.2024.01.15.md", WITH_JOURNAL) == p("/g", "journals", "2024_01_15.md")


def test_page_note():
    assert destination_path("/v/projects.alpha.notes.md", WITH_JOURNAL) == p("/g", "pages", "projects___alpha___notes.md")


def test_journal_hierarchy_without_journal_root_becomes_page():
    assert destination_path("/v/daily.2024.01.15.md", WITHOUT_JOURNAL) == p("/g", "pages", "daily___2024___01___15.md")


def test_journal_root_note_is_a_page():
    assert destination_path("/v/daily.md", WITH_JOURNAL) == p("/g", "pages", "daily.md")


def test_relative_source_path():
    assert destination_path("vault/root.md", WITH_JOURNAL) == p("/g", "pages", "root.md")


def test_journal_path_requires_journal_root():
    with pytest.raises(ConfigurationError):
        journal_path("daily.2024.01.15", WITHOUT_JOURNAL)


def test_page_path():
    assert page_path("a.b", WITHOUT_JOURNAL) == p("/g", "pages", "a___b.md")


def test_underscore_segments_can_collide():
    a = destination_path("/v/daily.2024.01_15.md", WITH_JOURNAL)
    b = destination_path("/v/daily.2024.01.15.md", WITH_JOURNAL)
    assert a == b
