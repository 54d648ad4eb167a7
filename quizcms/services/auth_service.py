"""Account service: password hashing, users and school accounts."""
import logging

import bcrypt
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DbSession

from quizcms.models.db.user import User, UserRole
from quizcms.services.password_cipher import PasswordCipher

logger = logging.getLogger(__name__)


class DuplicateUsernameError(Exception):
    """Username is already registered."""


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_user_by_username(db: DbSession, username: str) -> User | None:
    """Get user by username."""
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: DbSession, user_id: int) -> User | None:
    """Get user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def create_user(
    db: DbSession,
    username: str,
    password: str,
    role: str = UserRole.USER,
    status: bool = True,
    original_password: str | None = None,
) -> User:
    """
    Create a new user.

    Raises:
        DuplicateUsernameError: username already taken.
    """
    user = User(
        username=username,
        hashed_password=hash_password(password),
        role=role,
        status=status,
        original_password=original_password,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateUsernameError(f"Username {username} already taken") from e
    db.refresh(user)
    logger.info(f"Created user {user.username} (id={user.id}, role={user.role})")
    return user


def authenticate(db: DbSession, username: str, password: str) -> User | None:
    """Return the user if the password matches, otherwise None."""
    user = get_user_by_username(db, username)
    if user is None:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def list_users(
    db: DbSession, page: int, page_size: int, role: str | None = None
) -> tuple[list[User], int]:
    """Get one page of users and the total count."""
    stmt = select(User)
    count_stmt = select(func.count()).select_from(User)
    if role:
        stmt = stmt.where(User.role == role)
        count_stmt = count_stmt.where(User.role == role)

    users = db.execute(
        stmt.order_by(User.id).offset((page - 1) * page_size).limit(page_size)
    ).scalars().all()
    total = db.execute(count_stmt).scalar_one()
    return list(users), total


def toggle_user_status(db: DbSession, user: User) -> User:
    """Flip the active flag of a user."""
    user.status = not user.status
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.id} status set to {'active' if user.status else 'inactive'}")
    return user


def delete_user(db: DbSession, user: User) -> None:
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user.id}")


def create_school(
    db: DbSession, cipher: PasswordCipher, username: str, password: str
) -> User:
    """Create a school account, keeping its password readable for admins."""
    return create_user(
        db,
        username,
        password,
        role=UserRole.SCHOOL,
        original_password=cipher.encrypt(password),
    )


def list_schools(db: DbSession) -> list[User]:
    stmt = select(User).where(User.role == UserRole.SCHOOL).order_by(User.id)
    return list(db.execute(stmt).scalars().all())


def school_password(cipher: PasswordCipher, school: User) -> str | None:
    """Readable password of a school, or None if it cannot be recovered."""
    if not school.original_password:
        return None
    return cipher.decrypt(school.original_password)


def migrate_school_passwords(
    db: DbSession, cipher: PasswordCipher, default_password: str
) -> list[User]:
    """Give every school without a stored readable password the default one."""
    stmt = select(User).where(
        User.role == UserRole.SCHOOL,
        User.original_password.is_(None),
    )
    schools = list(db.execute(stmt).scalars().all())
    for school in schools:
        school.original_password = cipher.encrypt(default_password)
        logger.info(f"Migrated school: {school.username}")
    db.commit()
    return schools
