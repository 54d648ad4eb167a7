"""Database models."""
from quizcms.models.db.user import User, UserRole
from quizcms.models.db.quiz_item import QuizItem
from quizcms.models.db.catalog import Book, ChapterList, Subject
from quizcms.models.db.examination import Examination

__all__ = [
    "User",
    "UserRole",
    "QuizItem",
    "Book",
    "ChapterList",
    "Subject",
    "Examination",
]
