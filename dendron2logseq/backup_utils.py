import glob
import logging
import os
import re
import tarfile
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
BACKUP_NAME_RE = re.compile(r"^backup_(?P<name>.+)_(?P<ts>\d{8}_\d{6})\.tar\.gz$")


def backup_prefix(source_dir: str) -> str:
    return f"backup_{os.path.basename(os.path.normpath(source_dir))}"


def create_backup(source_dir: str, backup_dir: str) -> Optional[str]:
    """
    Creates a timestamped .tar.gz archive of a Logseq graph before it is written to.

    Args:
        source_dir: Path to the graph directory.
        backup_dir: Path to the backup directory.

    Returns:
        Full path to the created backup file if successful, otherwise None.
    """
    if not os.path.isdir(source_dir):
        logger.info(f"Graph directory {source_dir} does not exist yet, nothing to back up.")
        return None

    if not os.path.isdir(backup_dir):
        try:
            os.makedirs(backup_dir)
            logger.info(f"Created backup directory {backup_dir}")
        except OSError as e:
            logger.error(f"Error creating backup directory {backup_dir}: {e}")
            return None

    timestamp = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
    backup_filepath = os.path.join(backup_dir, f"{backup_prefix(source_dir)}_{timestamp}.tar.gz")

    logger.info(f"Creating backup of {source_dir} to {backup_filepath}")
    try:
        with tarfile.open(backup_filepath, "w:gz") as tar:
            tar.add(source_dir, arcname=os.path.basename(os.path.normpath(source_dir)))
        logger.info(f"Backup created: {backup_filepath}")
        return backup_filepath
    except OSError as e:
        logger.error(f"Error creating backup: {e}")
        if os.path.exists(backup_filepath):
            os.remove(backup_filepath)  # Clean up partially created backup
        return None


def manage_backups(backup_dir: str, source_dir: str, max_backups: int = 5) -> int:
    """
    Keeps only the newest max_backups archives of one graph in backup_dir.

    Returns:
        Number of archives deleted.
    """
    if not os.path.isdir(backup_dir):
        logger.warning(f"Backup directory {backup_dir} not found. Nothing to manage.")
        return 0

    prefix = backup_prefix(source_dir)
    backup_files = glob.glob(os.path.join(glob.escape(backup_dir), f"{glob.escape(prefix)}_*.tar.gz"))

    parsed_backups = []
    for f_path in backup_files:
        filename = os.path.basename(f_path)
        match = BACKUP_NAME_RE.match(filename)
        if not match:
            logger.warning(f"Unexpected filename format, skipping: {filename}")
            continue
        if f"backup_{match.group('name')}" != prefix:
            continue  # another graph whose name starts the same way
        try:
            dt_obj = datetime.strptime(match.group('ts'), TIMESTAMP_FORMAT)
        except ValueError:
            logger.warning(f"Could not parse timestamp from filename: {filename}")
            continue
        parsed_backups.append((dt_obj, f_path))

    # Oldest first
    parsed_backups.sort(key=lambda x: x[0])

    deleted = 0
    for _dt, path in parsed_backups[:max(len(parsed_backups) - max_backups, 0)]:
        try:
            os.remove(path)
            logger.info(f"Deleted old backup: {path}")
            deleted += 1
        except OSError as e:
            logger.error(f"Error deleting backup {path}: {e}")
    return deleted
