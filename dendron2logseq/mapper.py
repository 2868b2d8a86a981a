import os

from .hierarchy import (
    MARKDOWN_EXT,
    flatten_for_journal_suffix,
    flatten_for_page,
    identifier_of,
)
from .journal import is_journal_member


def journal_path(identifier: str, binding) -> str:
    name = flatten_for_journal_suffix(identifier, binding.journal_root)
    return os.path.join(binding.journal_dir, f"{name}{MARKDOWN_EXT}")


def page_path(identifier: str, binding) -> str:
    return os.path.join(binding.page_dir, f"{flatten_for_page(identifier)}{MARKDOWN_EXT}")


def destination_path(source_path: str, binding) -> str:
    """
    Map a Dendron note path to its file in the Logseq graph.

    Args:
        source_path: Path of a `.md` note in the binding's vault.
        binding: The VaultBinding the note belongs to.

    Returns:
        `<graph>/journals/<day>.md` for journal notes, otherwise
        `<graph>/pages/<flattened name>.md`.
    """
    identifier = identifier_of(source_path)
    if is_journal_member(identifier, binding.journal_root):
        return journal_path(identifier, binding)
    return page_path(identifier, binding)
