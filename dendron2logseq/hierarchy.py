"""
Dendron hierarchy names and their flattened Logseq forms.

A Dendron note called `projects.alpha.notes.md` sits at hierarchy position
`projects.alpha.notes`. Logseq has no dots in page names; namespaces are
written with `___` in page files and journal days with `_`.
"""

import os
from typing import List, Optional

MARKDOWN_EXT = ".md"
HIERARCHY_SEP = "."
PAGE_SEP = "___"
JOURNAL_SEP = "_"


class ConfigurationError(Exception):
    """Raised when a vault is missing configuration an operation needs."""


def identifier_of(file_path: str) -> str:
    """Return the hierarchy position of a note, e.g. `/v/a.b.md` -> `a.b`."""
    name = os.path.basename(file_path)
    if name.endswith(MARKDOWN_EXT):
        name = name[:-len(MARKDOWN_EXT)]
    return name


def split_identifier(identifier: str) -> List[str]:
    return identifier.split(HIERARCHY_SEP)


def flatten_for_page(identifier: str) -> str:
    return identifier.replace(HIERARCHY_SEP, PAGE_SEP)


def unflatten_page(flat_name: str) -> str:
    """Reverse flatten_for_page. Only exact for names without their own `___`."""
    return flat_name.replace(PAGE_SEP, HIERARCHY_SEP)


def flatten_for_journal_suffix(identifier: str, journal_root: Optional[str]) -> str:
    """
    Turn `daily.2024.01.15` into `2024_01_15` for journal root `daily`.

    Callers must check membership with journal.is_journal_member first; the
    prefix is cut by length, not matched.

    Raises:
        ConfigurationError: if no journal root is configured.
    """
    if not isinstance(journal_root, str):
        raise ConfigurationError("Cannot build a journal path: vault has no Dendron journal hierarchy configured")
    suffix = identifier[len(journal_root) + 1:]
    return suffix.replace(HIERARCHY_SEP, JOURNAL_SEP)


def malformed_reason(identifier: str) -> Optional[str]:
    """Describe what is odd about an identifier, or None if it is clean."""
    if not identifier:
        return "empty name"
    if identifier.startswith(HIERARCHY_SEP):
        return "leading dot"
    if identifier.endswith(HIERARCHY_SEP):
        return "trailing dot"
    if "" in split_identifier(identifier):
        return "consecutive dots"
    if PAGE_SEP in identifier:
        # would read back as an extra namespace level in Logseq
        return f"contains '{PAGE_SEP}'"
    return None
