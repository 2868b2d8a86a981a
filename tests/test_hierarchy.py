import pytest

from dendron2logseq.hierarchy import (
    ConfigurationError,
    flatten_for_journal_suffix,
    flatten_for_page,
    identifier_of,
    malformed_reason,
    split_identifier,
    unflatten_page,
)


@pytest.mark.parametrize("path, expected", [
    ("/v/daily.2024.01.15.md", "daily.2024.01.15"),
    ("projects.alpha.notes.md", "projects.alpha.notes"),
    ("/v/root.md", "root"),
    ("/v/a..b.md", "a..b"),
    ("/v/readme", "readme"),
])
def test_identifier_of(path, expected):
    assert identifier_of(path) == expected


def test_split_identifier():
    assert split_identifier("projects.alpha.notes") == ["projects", "alpha", "notes"]
    assert split_identifier("root") == ["root"]


@pytest.mark.parametrize("identifier", ["root", "notes", "my-page", "with_underscore"])
def test_flatten_for_page_leaves_dotless_names_alone(identifier):
    assert flatten_for_page(identifier) == identifier


@pytest.mark.parametrize("identifier", ["a.b", "a.b.c.d", "daily.2024.01.15", "x"])
def test_flatten_for_page_replaces_every_dot(identifier):
    flat = flatten_for_page(identifier)
    assert "." not in flat
    assert flat.count("___") == identifier.count(".")


def test_flatten_for_page_passes_empty_segments_through():
    assert flatten_for_page("a..b") == "a______b"


@pytest.mark.parametrize("identifier", ["projects.alpha.notes", "root", "lang.python.typing2"])
def test_page_round_trip_for_plain_segments(identifier):
    assert unflatten_page(flatten_for_page(identifier)) == identifier


def test_page_round_trip_breaks_on_existing_escape():
    assert unflatten_page(flatten_for_page("a___b.c")) != "a___b.c"


def test_flatten_for_journal_suffix():
    assert flatten_for_journal_suffix("daily.2024.01.15", "daily") == "2024_01_15"
    assert flatten_for_journal_suffix("daily.journal.2024.01.15", "daily.journal") == "2024_01_15"


def test_flatten_for_journal_suffix_without_root():
    with pytest.raises(ConfigurationError):
        flatten_for_journal_suffix("daily.2024.01.15", None)


@pytest.mark.parametrize("identifier, reason", [
    ("projects.alpha", None),
    ("", "empty name"),
    (".hidden", "leading dot"),
    ("a.b.", "trailing dot"),
    ("a..b", "consecutive dots"),
    ("a___b", "contains '___'"),
])
def test_malformed_reason(identifier, reason):
    assert malformed_reason(identifier) == reason
