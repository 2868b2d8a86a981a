import os
from dataclasses import dataclass
from typing import Optional

from . import mapper

JOURNALS_DIR = "journals"
PAGES_DIR = "pages"

# CLI spellings of "this vault has no journal hierarchy"
NO_JOURNAL_VALUES = ("", "-")


@dataclass(frozen=True)
class VaultBinding:
    """One Dendron vault and the Logseq graph it converts into."""
    source_root: str
    destination_root: str
    journal_root: Optional[str] = None

    @classmethod
    def from_triple(cls, source_root: str, destination_root: str, journal_root: Optional[str] = None) -> "VaultBinding":
        if journal_root is not None:
            journal_root = journal_root.strip()
            if journal_root in NO_JOURNAL_VALUES:
                journal_root = None
        return cls(source_root, destination_root, journal_root)

    @property
    def journal_dir(self) -> str:
        return os.path.join(self.destination_root, JOURNALS_DIR)

    @property
    def page_dir(self) -> str:
        return os.path.join(self.destination_root, PAGES_DIR)

    def destination_path(self, source_path: str) -> str:
        return mapper.destination_path(source_path, self)
