"""Pydantic models."""
from quizcms.models.auth import (
    DeletedResponse,
    LoginResponse,
    MessageResponse,
    SchoolCreate,
    SchoolResponse,
    UserListResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserStatusResponse,
)
from quizcms.models.catalog import (
    BookCreate,
    BookResponse,
    ChapterListCreate,
    ChapterListResponse,
    SubjectCreate,
    SubjectResponse,
)
from quizcms.models.examinations import ExaminationCreate, ExaminationResponse
from quizcms.models.quizzes import (
    NormalizedQuizItem,
    QuizImageResponse,
    QuizItemResponse,
    QuizListResponse,
    QuizOption,
    QuizQuestion,
    SubQuestion,
)

__all__ = [
    "BookCreate",
    "BookResponse",
    "ChapterListCreate",
    "ChapterListResponse",
    "DeletedResponse",
    "ExaminationCreate",
    "ExaminationResponse",
    "LoginResponse",
    "MessageResponse",
    "NormalizedQuizItem",
    "QuizImageResponse",
    "QuizItemResponse",
    "QuizListResponse",
    "QuizOption",
    "QuizQuestion",
    "SchoolCreate",
    "SchoolResponse",
    "SubQuestion",
    "SubjectCreate",
    "SubjectResponse",
    "UserListResponse",
    "UserLogin",
    "UserRegister",
    "UserResponse",
    "UserStatusResponse",
]
