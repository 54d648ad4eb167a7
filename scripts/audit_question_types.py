#!/usr/bin/env python3
"""
Report stored quizzes whose questions use question types outside the registry.

Older clients sent labels such as "Multiple Choice". They are not mapped
automatically; this report is the input for deciding how to migrate them.

Usage:
    python scripts/audit_question_types.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quizcms import question_types
from quizcms.config import Settings
from quizcms.database import Database
from quizcms.services.quiz_service import find_unknown_question_types


def main() -> int:
    settings = Settings.from_env()
    database = Database(settings.database_url)
    database.init_db()
    db = database.session()
    try:
        report = find_unknown_question_types(db)
    finally:
        db.close()
        database.dispose()

    allowed = [f"{tag} ({question_types.get_entry(tag).label})" for tag in question_types.allowed_types()]
    print(f"Allowed types: {', '.join(allowed)}")
    if not report:
        print("All stored quizzes use registered question types")
        return 0

    for entry in report:
        print(f"Quiz {entry['id']} ({entry['title']}): {', '.join(entry['types'])}")
    print(f"{len(report)} quizzes need a decision before migration")
    return 1


if __name__ == "__main__":
    sys.exit(main())
