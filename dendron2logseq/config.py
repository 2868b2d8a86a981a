"""
Settings and vault bindings.

Defaults come from the environment (a `.env` file is loaded if present).
Vaults come from repeated `-V SOURCE DEST JOURNAL` options and/or a YAML file:

    vaults:
      - source: ~/dendron/vault
        destination: ~/logseq/graph
        journal: daily
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import yaml
from dotenv import find_dotenv, load_dotenv

from .hierarchy import ConfigurationError
from .vault import VaultBinding

logger = logging.getLogger(__name__)

ENV_CONFIG = "DENDRON2LOGSEQ_CONFIG"
ENV_LOG_FILE = "DENDRON2LOGSEQ_LOG_FILE"
ENV_BACKUP_DIR = "DENDRON2LOGSEQ_BACKUP_DIR"
DEFAULT_LOG_FILE = "dendron2logseq.log"


@dataclass(frozen=True)
class Settings:
    config_file: Optional[str]
    log_file: str
    backup_dir: Optional[str]


def _expand_path(path: str) -> str:
    return os.path.expandvars(os.path.expanduser(path))


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    config_file = os.getenv(ENV_CONFIG)
    backup_dir = os.getenv(ENV_BACKUP_DIR)
    return Settings(
        config_file=_expand_path(config_file) if config_file else None,
        log_file=_expand_path(os.getenv(ENV_LOG_FILE) or DEFAULT_LOG_FILE),
        backup_dir=_expand_path(backup_dir) if backup_dir else None,
    )


def bindings_from_args(triples: Optional[List[List[str]]]) -> List[VaultBinding]:
    return [
        VaultBinding.from_triple(_expand_path(src), _expand_path(dest), journal)
        for src, dest, journal in (triples or [])
    ]


def load_bindings_file(path: str) -> Tuple[List[VaultBinding], int]:
    """Read vault bindings from a YAML config file.

    Incomplete entries are logged and skipped so the other vaults still run.

    Returns:
        (bindings, invalid): the usable bindings and the number of skipped entries.

    Raises:
        ConfigurationError: if the file is unreadable or has no `vaults` list.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    entries = data.get('vaults') if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ConfigurationError(f"{path}: expected a 'vaults' list")

    bindings = []
    invalid = 0
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get('source') or not entry.get('destination'):
            logger.error(f"{path}: vault #{i + 1} needs 'source' and 'destination', skipping it")
            invalid += 1
            continue
        journal = entry.get('journal')
        bindings.append(VaultBinding.from_triple(
            _expand_path(str(entry['source'])),
            _expand_path(str(entry['destination'])),
            str(journal) if journal is not None else None,
        ))
    logger.debug(f"Loaded {len(bindings)} vaults from {path}")
    return bindings, invalid
