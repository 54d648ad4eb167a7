"""API route modules."""
from quizcms.routes import auth, books, chapters, examinations, quizzes, subjects, users

__all__ = ["auth", "books", "chapters", "examinations", "quizzes", "subjects", "users"]
