import pytest

from quizcms.config import DEFAULT_SCHOOL_PASSWORD
from quizcms.models.db.quiz_item import QuizItem
from quizcms.models.db.user import UserRole
from quizcms.services import auth_service
from quizcms.services.password_cipher import PasswordCipher
from quizcms.services.quiz_service import create_quiz, find_unknown_question_types


def test_migrate_school_passwords(db) -> None:
    cipher = PasswordCipher("test-secret")
    legacy = auth_service.create_user(db, "old-school", "real-pass", role=UserRole.SCHOOL)
    current = auth_service.create_school(db, cipher, "new-school", "known-pass")
    plain = auth_service.create_user(db, "plain-user", "user-pass")

    migrated = auth_service.migrate_school_passwords(db, cipher, DEFAULT_SCHOOL_PASSWORD)

    assert [s.username for s in migrated] == ["old-school"]
    db.refresh(legacy)
    db.refresh(plain)
    assert auth_service.school_password(cipher, legacy) == DEFAULT_SCHOOL_PASSWORD
    assert auth_service.school_password(cipher, current) == "known-pass"
    assert plain.original_password is None
    # Login hash is untouched
    assert auth_service.authenticate(db, "old-school", "real-pass") is not None

    assert auth_service.migrate_school_passwords(db, cipher, DEFAULT_SCHOOL_PASSWORD) == []


def test_cipher_with_other_key_cannot_read_password(db) -> None:
    school = auth_service.create_school(db, PasswordCipher("key-one"), "school", "pass-123")
    assert auth_service.school_password(PasswordCipher("key-two"), school) is None


def test_find_unknown_question_types(db, quiz_payload) -> None:
    create_quiz(db, quiz_payload)
    legacy = QuizItem(
        class_name="5",
        subject="Science",
        book="Reader",
        chapter="Plants",
        title="Old quiz",
        status=True,
        questions=[
            {"questionType": "Multiple Choice", "question": "Q1", "marks": 1},
            {"questionType": "essay", "question": "Q2", "marks": 2},
            {"questionType": "Picture questions", "question": "Q3", "marks": 2},
        ],
    )
    db.add(legacy)
    db.commit()

    report = find_unknown_question_types(db)
    assert report == [
        {"id": legacy.id, "title": "Old quiz", "types": ["Multiple Choice", "Picture questions"]}
    ]


def test_find_unknown_question_types_reports_non_object_questions(db) -> None:
    legacy = QuizItem(
        class_name="5",
        subject="English",
        book="Reader",
        chapter="Poems",
        title="Plain text quiz",
        status=True,
        questions=["What rhymes with cat?", {"questionType": "essay", "question": "Q", "marks": 1}],
    )
    db.add(legacy)
    db.commit()

    assert find_unknown_question_types(db) == [
        {"id": legacy.id, "title": "Plain text quiz", "types": ["None"]}
    ]


def test_create_user_rejects_taken_username(db) -> None:
    auth_service.create_user(db, "golf", "secret123")
    with pytest.raises(auth_service.DuplicateUsernameError):
        auth_service.create_user(db, "golf", "other-pass")
    # Session is still usable after the failed insert
    assert auth_service.get_user_by_username(db, "golf") is not None
