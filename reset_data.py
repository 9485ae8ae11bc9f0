"""
Reset the Study Organizer by clearing every stored entry.
This deletes the profile, login flag and all saved records.
"""

import logging

from BackEnd.core import config
from BackEnd.core.paths import db_path
from BackEnd.repos import storage_repo

logger = logging.getLogger(__name__)

def reset_all_data():
    """Remove every key from the store after confirmation."""
    db_file = db_path()
    keys = storage_repo.keys()
    if not keys:
        print("No saved data found. Nothing to reset.")
        return False

    print(f"Found {len(keys)} stored entries in: {db_file}")
    for key in keys:
        print(f"  - {key}")
    confirm = input("Are you sure you want to delete all of them? This cannot be undone. (yes/no): ")
    if confirm.lower() not in ['yes', 'y']:
        print("Reset cancelled.")
        return False

    removed = storage_repo.clear()
    logger.info("Cleared %d stored entries", removed)
    print(f"✓ Removed {removed} entries. Next start will run setup again.")
    return True

def main():
    config.configure_logging()
    print("=" * 50)
    print("Study Organizer - Reset All Data")
    print("=" * 50)
    reset_all_data()

if __name__ == "__main__":
    main()
