#!/usr/bin/env python3
"""
Data migration script for school accounts created before readable passwords.

This script:
1. Finds every user with role "school" and no stored readable password
2. Stores the default school password, encrypted with SECRET_KEY

The bcrypt hash used for login is left alone, so affected schools keep
logging in with their real password; admins see the default one until the
school is re-created.

Usage:
    python scripts/migrate_school_passwords.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quizcms.config import DEFAULT_SCHOOL_PASSWORD, Settings
from quizcms.database import Database
from quizcms.logging_setup import setup_console_logging
from quizcms.services.auth_service import migrate_school_passwords
from quizcms.services.password_cipher import PasswordCipher


def main() -> int:
    settings = Settings.from_env()
    setup_console_logging(settings.log_level)

    database = Database(settings.database_url)
    database.init_db()
    db = database.session()
    try:
        migrated = migrate_school_passwords(
            db, PasswordCipher(settings.secret_key), DEFAULT_SCHOOL_PASSWORD
        )
        print(f"Migration completed: {len(migrated)} schools updated")
        return 0
    except Exception as e:
        db.rollback()
        print(f"Migration error: {e}")
        return 1
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    sys.exit(main())
