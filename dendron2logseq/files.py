import glob
import logging
import os
import shutil
from typing import Iterator

from .frontmatter import strip_title

logger = logging.getLogger(__name__)


def iter_vault_notes(source_root: str) -> Iterator[str]:
    """Yield the Markdown notes of a Dendron vault, one path at a time.

    Dendron keeps a vault flat (hierarchy lives in the file names), so only
    the top level is scanned.
    """
    pattern = os.path.join(glob.escape(source_root), '*.md')
    for path in sorted(glob.glob(pattern)):
        if os.path.isfile(path):
            yield path


def ensure_graph_dirs(binding) -> None:
    for path in (binding.journal_dir, binding.page_dir):
        if not os.path.isdir(path):
            os.makedirs(path, exist_ok=True)
            logger.info(f"Created directory {path}")


def copy_note(src: str, dest: str, remove_titles: bool = False) -> None:
    """Copy a note into the graph, optionally dropping its front matter title.

    The destination directory has to exist (see ensure_graph_dirs).
    """
    if not remove_titles:
        shutil.copyfile(src, dest)
        return
    with open(src, 'r', encoding='utf-8', newline='') as f:
        content = f.read()
    with open(dest, 'w', encoding='utf-8', newline='') as f:
        f.write(strip_title(content))
