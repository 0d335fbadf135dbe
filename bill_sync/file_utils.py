"""
File operation utilities for backup and restore
"""

import os
import shutil
from datetime import datetime as dt


def create_backup(file_path: str) -> str | None:
    """
    Create a timestamped backup of a file.

    Args:
        file_path: Path to the file to backup

    Returns:
        Path to the backup file, None if there is nothing to back up yet
    """
    if not os.path.exists(file_path):
        return None

    timestamp = dt.now().strftime("%Y%m%d_%H%M%S")
    root, ext = os.path.splitext(file_path)
    backup_path = f"{root}_backup_{timestamp}{ext}"
    shutil.copy2(file_path, backup_path)
    print(f"Creating backup: {backup_path}")
    return backup_path


def restore_from_backup(backup_path: str | None, target_path: str) -> None:
    """
    Restore a file from its backup.

    Without a backup the partially written target is removed instead.

    Args:
        backup_path: Path to the backup file
        target_path: Path to restore to
    """
    print("Restoring from backup...")
    if backup_path is None:
        if os.path.exists(target_path):
            os.remove(target_path)
        return

    shutil.copy2(backup_path, target_path)
    print("✓ Restored from backup")


def remove_backup(backup_path: str | None) -> None:
    """
    Remove a backup file if it exists.

    Args:
        backup_path: Path to the backup file
    """
    if backup_path and os.path.exists(backup_path):
        os.remove(backup_path)
        print("✓ Removed backup file")
