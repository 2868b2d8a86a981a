import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .files import copy_note, ensure_graph_dirs, iter_vault_notes

logger = logging.getLogger(__name__)


@dataclass
class ConvertSummary:
    processed: int = 0
    copied: int = 0
    journals: int = 0
    pages: int = 0
    skipped_collisions: int = 0
    errors: int = 0

    @property
    def ok(self) -> bool:
        return not (self.errors or self.skipped_collisions)


def plan_vault(binding) -> Tuple[List[Tuple[str, str]], Dict[str, List[str]]]:
    """
    Work out where every note of a vault goes before anything is copied.

    Returns:
        (plan, collisions): plan is a list of (src, dest) pairs, one per
        destination, in source order. collisions maps a destination claimed
        by several notes to all of them; only the first one is in the plan.
    """
    claimed: Dict[str, List[str]] = {}
    plan = []
    for src in iter_vault_notes(binding.source_root):
        dest = binding.destination_path(src)
        if dest in claimed:
            claimed[dest].append(src)
            continue
        claimed[dest] = [src]
        plan.append((src, dest))
    collisions = {dest: srcs for dest, srcs in claimed.items() if len(srcs) > 1}
    return plan, collisions


def convert_vault(binding, remove_titles: bool = False, dry_run: bool = False) -> ConvertSummary:
    summary = ConvertSummary()
    if not os.path.isdir(binding.source_root):
        logger.error(f"Vault directory {binding.source_root} not found.")
        summary.errors += 1
        return summary

    plan, collisions = plan_vault(binding)
    for dest, srcs in collisions.items():
        logger.warning(f"Destination {dest} claimed by {len(srcs)} notes, keeping {srcs[0]}, skipping: {', '.join(srcs[1:])}")
        summary.skipped_collisions += len(srcs) - 1
    summary.processed = len(plan) + summary.skipped_collisions

    if not dry_run:
        ensure_graph_dirs(binding)

    for src, dest in plan:
        logger.info(f"{src} -> {dest}")
        if dry_run:
            continue
        try:
            copy_note(src, dest, remove_titles=remove_titles)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error copying {src} to {dest}: {e}")
            summary.errors += 1
            continue
        summary.copied += 1
        if os.path.dirname(dest) == binding.journal_dir:
            summary.journals += 1
        else:
            summary.pages += 1

    return summary
