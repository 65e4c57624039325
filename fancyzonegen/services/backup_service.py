"""Backup Service - Keeps one copy of the layouts file per distinct content."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackupResult:
    path: Path
    created: bool


def backup_path(config_file: Path, content_hash: str) -> Path:
    """``custom-layouts.json`` -> ``custom-layouts.<HASH>.json.bak`` in the same folder."""
    config_file = Path(config_file)
    return config_file.with_name(f"{config_file.stem}.{content_hash}.json.bak")


def ensure_backup(config_file: Path, content_hash: str) -> BackupResult:
    """Copy ``config_file`` to its hash-named backup unless that backup exists.

    ``content_hash`` must be the digest of the file's current bytes, so an
    existing backup is known to hold identical content.
    """
    target = backup_path(config_file, content_hash)
    if target.is_file():
        logger.debug(f"Backup {target} already present, skipping copy")
        return BackupResult(path=target, created=False)

    shutil.copyfile(config_file, target)
    logger.debug(f"Copied {config_file} to {target}")
    return BackupResult(path=target, created=True)
