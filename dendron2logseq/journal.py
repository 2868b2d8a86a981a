from typing import Optional

from .hierarchy import HIERARCHY_SEP


def is_journal_member(identifier: str, journal_root: Optional[str]) -> bool:
    """
    True if the note lives below the journal hierarchy.

    The journal root note itself (`daily` for root `daily`) is a regular page;
    only its dotted descendants are journal days. Without a journal root
    nothing is a journal entry.
    """
    if not isinstance(journal_root, str):
        return False
    return identifier.startswith(f"{journal_root}{HIERARCHY_SEP}")
