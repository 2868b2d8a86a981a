"""
Pre-conversion check of a Dendron vault.

Reports notes sharing a front matter title, notes that would land on the same
Logseq file, and note names that do not flatten cleanly.
"""

import logging
import os
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from .files import iter_vault_notes
from .frontmatter import read_frontmatter
from .hierarchy import identifier_of, malformed_reason

logger = logging.getLogger(__name__)


@dataclass
class CheckReport:
    """Findings for one vault."""
    processed: int = 0
    titles: Dict[str, List[str]] = field(default_factory=lambda: defaultdict(list))
    destinations: Dict[str, List[str]] = field(default_factory=lambda: defaultdict(list))
    untitled: List[str] = field(default_factory=list)
    malformed: Dict[str, str] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def duplicate_titles(self) -> Dict[str, List[str]]:
        return {t: paths for t, paths in self.titles.items() if len(paths) > 1}

    @property
    def collisions(self) -> Dict[str, List[str]]:
        return {d: paths for d, paths in self.destinations.items() if len(paths) > 1}


def check_vault(binding) -> CheckReport:
    report = CheckReport()
    if not os.path.isdir(binding.source_root):
        logger.error(f"Vault directory {binding.source_root} not found.")
        report.errors.append(binding.source_root)
        return report

    for path in iter_vault_notes(binding.source_root):
        report.processed += 1

        reason = malformed_reason(identifier_of(path))
        if reason:
            report.malformed[path] = reason

        report.destinations[binding.destination_path(path)].append(path)

        try:
            frontmatter = read_frontmatter(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            report.errors.append(path)
            continue

        title = frontmatter.get('title')
        if title is None:
            logger.debug(f"No title in frontmatter of {path}")
            report.untitled.append(path)
            continue
        report.titles[str(title)].append(path)

    return report


def _print_group(tag: str, key: str, paths: List[str]) -> None:
    joined = "\n  - ".join(paths)
    print(f"[{tag}] {key}:\n  - {joined}")


def print_check_report(report: CheckReport) -> None:
    print(f"processed {report.processed} files")
    for title, paths in report.duplicate_titles.items():
        _print_group("TITLE", title, paths)
    for dest, paths in report.collisions.items():
        _print_group("DEST", dest, paths)
    for path, reason in report.malformed.items():
        print(f"[NAME] {path}: {reason}")
    if report.untitled:
        print(f"{len(report.untitled)} files without a title")
    if report.errors:
        print(f"{len(report.errors)} files could not be read")
