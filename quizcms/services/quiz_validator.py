"""Write-time validation for quiz items.

``validate_quiz_item`` takes a decoded JSON body and either returns a
``NormalizedQuizItem`` ready to persist or raises the first
``QuizValidationError`` it finds. Checks always run in the same order so the
reported error is deterministic:

1. ``className``, ``subject``, ``book``, ``chapter`` present and non-empty
2. ``questions`` is a non-empty list
3. per question, in order: known ``questionType``; ``question`` and
   ``marks`` present with ``marks >= 1``; options for choice types;
   sub-questions for composite types

``correctAnswer`` is stored as given and never checked.
"""
import copy
import math
from collections.abc import Mapping
from typing import Any

from quizcms import question_types
from quizcms.models.quizzes import NormalizedQuizItem, QuizOption, QuizQuestion, SubQuestion

REQUIRED_QUIZ_FIELDS = ("className", "subject", "book", "chapter")


class QuizValidationError(ValueError):
    """Base class for rejected quiz payloads."""

    code = "invalid_quiz"

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.index = index

    def to_dict(self) -> dict[str, object]:
        detail: dict[str, object] = {"error": self.code, "message": self.message}
        if self.index is not None:
            detail["index"] = self.index
        return detail


class MissingField(QuizValidationError):
    code = "missing_field"

    def __init__(self, field: str, index: int | None = None) -> None:
        if index is None:
            message = f"{field} is required"
        else:
            message = f"Question {index}: {field} is required"
        super().__init__(message, index)
        self.field = field

    def to_dict(self) -> dict[str, object]:
        detail = super().to_dict()
        detail["field"] = self.field
        return detail


class EmptyQuestionSet(QuizValidationError):
    code = "empty_question_set"

    def __init__(self) -> None:
        super().__init__("At least one question is required")


class InvalidQuestionType(QuizValidationError):
    code = "invalid_question_type"

    def __init__(self, index: int, value: object) -> None:
        allowed = ", ".join(question_types.allowed_types())
        super().__init__(
            f"Question {index}: invalid questionType {value!r} (allowed: {allowed})",
            index,
        )
        self.value = value

    def to_dict(self) -> dict[str, object]:
        detail = super().to_dict()
        detail["value"] = self.value if isinstance(self.value, (str, int, float)) else None
        return detail


class InvalidMarks(QuizValidationError):
    code = "invalid_marks"

    def __init__(self, index: int) -> None:
        super().__init__(f"Question {index}: marks must be a number of at least 1", index)


class MissingOptions(QuizValidationError):
    code = "missing_options"

    def __init__(self, index: int) -> None:
        super().__init__(
            f"Question {index}: choice questions need at least one option with text",
            index,
        )


class MissingSubQuestions(QuizValidationError):
    code = "missing_sub_questions"

    def __init__(self, index: int) -> None:
        super().__init__(
            f"Question {index}: picture questions need at least one sub-question",
            index,
        )


def _text(value: object) -> str | None:
    """Return trimmed text for strings and numbers, None for anything else or blank."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def _marks(value: object) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value < 1:
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _flag(value: object, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in ("", "false", "0", "no", "off")
    return bool(value)


def _options(index: int, raw: object) -> list[QuizOption]:
    if not isinstance(raw, list) or not raw:
        raise MissingOptions(index)
    options = []
    for option in raw:
        if not isinstance(option, Mapping):
            raise MissingOptions(index)
        text = _text(option.get("text"))
        if text is None:
            raise MissingOptions(index)
        options.append(QuizOption(text=text, is_correct=option.get("isCorrect") is True))
    return options


def _sub_questions(index: int, raw: object) -> list[SubQuestion]:
    if not isinstance(raw, list) or not raw:
        raise MissingSubQuestions(index)
    items = []
    for item in raw:
        text = _text(item.get("text")) if isinstance(item, Mapping) else _text(item)
        if text is None:
            raise MissingSubQuestions(index)
        items.append(SubQuestion(text=text))
    return items


def _question(index: int, raw: object) -> QuizQuestion:
    if not isinstance(raw, Mapping):
        raise InvalidQuestionType(index, None)

    question_type = raw.get("questionType")
    if not question_types.is_known(question_type):
        raise InvalidQuestionType(index, question_type)

    prompt = _text(raw.get("question"))
    if prompt is None:
        raise MissingField("question", index)
    if raw.get("marks") is None:
        raise MissingField("marks", index)
    marks = _marks(raw.get("marks"))
    if marks is None:
        raise InvalidMarks(index)

    options: list[QuizOption] = []
    sub_questions: list[SubQuestion] = []
    if question_types.is_choice_based(question_type):
        options = _options(index, raw.get("options"))
    if question_types.is_composite_based(question_type):
        sub_questions = _sub_questions(index, raw.get("subQuestions"))

    image_url = raw.get("imageUrl")
    if not isinstance(image_url, str) or not image_url.strip():
        image_url = None
    return QuizQuestion(
        question_id=_text(raw.get("questionId")),
        qtitle=_text(raw.get("qtitle")),
        section=copy.deepcopy(raw.get("section")),
        question_type=question_type,
        question=prompt,
        marks=marks,
        options=options,
        sub_questions=sub_questions,
        correct_answer=copy.deepcopy(raw.get("correctAnswer")),
        image_url=image_url.strip() if image_url else None,
    )


def validate_quiz_item(payload: Mapping[str, Any]) -> NormalizedQuizItem:
    """Validate a quiz payload and apply defaults.

    Raises:
        QuizValidationError: the first rule the payload breaks.
    """
    if not isinstance(payload, Mapping):
        raise MissingField(REQUIRED_QUIZ_FIELDS[0])

    fields: dict[str, str] = {}
    for name in REQUIRED_QUIZ_FIELDS:
        value = _text(payload.get(name))
        if value is None:
            raise MissingField(name)
        fields[name] = value

    raw_questions = payload.get("questions")
    if not isinstance(raw_questions, list) or not raw_questions:
        raise EmptyQuestionSet()

    questions = [_question(index, raw) for index, raw in enumerate(raw_questions)]

    title = _text(payload.get("title")) or f"Quiz for {fields['chapter']}"
    return NormalizedQuizItem(
        class_name=fields["className"],
        subject=fields["subject"],
        book=fields["book"],
        chapter=fields["chapter"],
        title=title,
        status=_flag(payload.get("status")),
        questions=questions,
    )
