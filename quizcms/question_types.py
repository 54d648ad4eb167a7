"""Registry of the question types a quiz may contain.

Every ``questionType`` tag the service accepts is declared here once,
together with the substructure it needs:

* choice-based types carry a non-empty ``options`` list,
* composite (picture) types carry a non-empty ``subQuestions`` list,
* the rest carry neither.

Adding a question type means adding one entry to ``_REGISTRY``.
"""
import enum
from dataclasses import dataclass


class Substructure(str, enum.Enum):
    """Structural part a question type requires."""

    NONE = "none"
    OPTIONS = "options"
    SUB_QUESTIONS = "subQuestions"


@dataclass(frozen=True)
class QuestionTypeEntry:
    tag: str
    label: str
    requires: Substructure = Substructure.NONE


_REGISTRY: dict[str, QuestionTypeEntry] = {
    entry.tag: entry
    for entry in (
        QuestionTypeEntry("mcq", "Multiple choice", Substructure.OPTIONS),
        QuestionTypeEntry("fillblank", "Fill in the blank"),
        QuestionTypeEntry("shortanswer", "Short answer"),
        QuestionTypeEntry("essay", "Essay"),
        QuestionTypeEntry("matching", "Matching"),
        QuestionTypeEntry("image", "Picture questions", Substructure.SUB_QUESTIONS),
    )
}

# Labels used by older clients. Kept only so stored data can be audited;
# they are not accepted and not mapped onto the tags above.
LEGACY_LABELS = (
    "Multiple Choice",
    "Direct Questions",
    "Answer the following questions",
    "Picture questions",
)


def allowed_types() -> tuple[str, ...]:
    """Known type tags, in declaration order."""
    return tuple(_REGISTRY)


def is_known(question_type: object) -> bool:
    return isinstance(question_type, str) and question_type in _REGISTRY


def get_entry(question_type: str) -> QuestionTypeEntry:
    """Return the registry entry for a tag, raising KeyError if unknown."""
    return _REGISTRY[question_type]


def is_choice_based(question_type: object) -> bool:
    """True if questions of this type must carry options."""
    return is_known(question_type) and _REGISTRY[question_type].requires is Substructure.OPTIONS


def is_composite_based(question_type: object) -> bool:
    """True if questions of this type must carry sub-questions."""
    return (
        is_known(question_type)
        and _REGISTRY[question_type].requires is Substructure.SUB_QUESTIONS
    )
