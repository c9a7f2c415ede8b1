# File: app/models/local_auth.py

"""
Local (username + password) authentication for declarative models.

Attach it by inheriting ``LocalAuthMixin`` ahead of ``Base``:

    class User(LocalAuthMixin, Base):
        __tablename__ = "users"
        ...

The mixin injects the credential columns (username, password_hash, salt,
attempts, last_login) and the register / authenticate operations.
Behaviour is tuned per model through the ``local_auth_options`` class
attribute.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, ClassVar, Optional

import bcrypt
from sqlalchemy import DateTime, Integer, String, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Mapped, Session, mapped_column, object_session

from app.core.errors import (
    AttemptTooSoonError,
    IncorrectPasswordError,
    IncorrectUsernameError,
    MissingPasswordError,
    MissingUsernameError,
    NoSaltValueStoredError,
    PasswordValidationError,
    TooManyAttemptsError,
    UserExistsError,
)

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


def default_password_validator(password: str) -> None:
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise PasswordValidationError(
            f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes long"
        )


@dataclass(frozen=True)
class LocalAuthOptions:
    username_lowercase: bool = False
    rounds: int = 12

    # Login throttling (all intervals in milliseconds)
    limit_attempts: bool = False
    max_attempts: float = math.inf
    interval_ms: int = 100
    max_interval_ms: int = 300_000
    unlock_interval_ms: Optional[int] = None

    password_validator: Callable[[str], None] = default_password_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LocalAuthMixin:
    local_auth_options: ClassVar[LocalAuthOptions] = LocalAuthOptions()

    username: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    salt: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    attempts: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_login: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    # -----------------------------
    # Instance operations
    # -----------------------------

    def set_password(self, password: Optional[str]) -> None:
        if not password:
            raise MissingPasswordError()

        self.local_auth_options.password_validator(password)

        salt = bcrypt.gensalt(rounds=self.local_auth_options.rounds)
        self.salt = salt.decode("utf-8")
        self.password_hash = bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def authenticate(self, password: Optional[str]):
        """
        Check ``password`` against the stored hash.

        Returns the user on success. Every failure raises a subclass of
        ``AuthenticationError``. With ``limit_attempts`` the attempt counter
        and ``last_login`` are updated and committed on the way.
        """
        options = self.local_auth_options

        if not self.salt or not self.password_hash:
            raise NoSaltValueStoredError()
        if not password:
            raise MissingPasswordError()

        if options.limit_attempts:
            self._check_attempts()

        if self._password_matches(password):
            if options.limit_attempts:
                self.attempts = 0
                self.last_login = _utcnow()
                self._save()
            return self

        if options.limit_attempts:
            self.attempts = (self.attempts or 0) + 1
            self.last_login = _utcnow()
            self._save()
            logger.info(
                "Failed login",
                extra={"username": self.username, "attempts": self.attempts},
            )
            if self.attempts >= options.max_attempts:
                raise TooManyAttemptsError()

        raise IncorrectPasswordError()

    def change_password(self, old_password: Optional[str], new_password: Optional[str]) -> None:
        if not old_password or not new_password:
            raise MissingPasswordError()

        self.authenticate(old_password)
        self.set_password(new_password)
        self._save()

    def reset_attempts(self) -> None:
        self.attempts = 0
        self._save()

    # -----------------------------
    # Type-level operations
    # -----------------------------

    @classmethod
    def normalize_username(cls, username: str) -> str:
        if cls.local_auth_options.username_lowercase:
            return username.lower()
        return username

    @classmethod
    def find_by_username(cls, db: Session, username: str):
        stmt = select(cls).where(cls.username == cls.normalize_username(username))
        return db.execute(stmt).scalar_one_or_none()

    @classmethod
    def register(cls, db: Session, user, password: Optional[str]):
        """
        Persist a new ``user`` with ``password``.

        The username must be set on ``user`` and must not be taken yet.
        """
        if not user.username:
            raise MissingUsernameError()

        user.username = cls.normalize_username(user.username)

        if cls.find_by_username(db, user.username) is not None:
            raise UserExistsError()

        user.set_password(password)

        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            # Lost a race with another registration for the same username
            if cls.find_by_username(db, user.username) is not None:
                raise UserExistsError()
            raise
        db.refresh(user)

        logger.info("Registered user", extra={"username": user.username})
        return user

    @classmethod
    def authenticate_by_username(cls, db: Session, username: Optional[str], password: Optional[str]):
        if not username:
            raise MissingUsernameError()

        user = cls.find_by_username(db, username)
        if user is None:
            raise IncorrectUsernameError()
        return user.authenticate(password)

    # -----------------------------
    # Internals
    # -----------------------------

    def _password_matches(self, password: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), self.password_hash.encode("utf-8"))
        except ValueError:
            # Over-long input or a corrupt stored hash
            return False

    def _check_attempts(self) -> None:
        options = self.local_auth_options
        attempts = self.attempts or 0

        if self.last_login is None:
            if attempts >= options.max_attempts:
                raise TooManyAttemptsError()
            return

        elapsed_ms = (_utcnow() - _as_utc(self.last_login)).total_seconds() * 1000

        if options.unlock_interval_ms is not None and elapsed_ms > options.unlock_interval_ms:
            self.attempts = attempts = 0
            self._save()

        wait_ms = min(options.interval_ms ** math.log(attempts + 1), options.max_interval_ms)
        if attempts > 0 and elapsed_ms < wait_ms:
            self.last_login = _utcnow()
            self._save()
            raise AttemptTooSoonError()

        if attempts >= options.max_attempts:
            raise TooManyAttemptsError()

    def _save(self) -> None:
        db = object_session(self)
        if db is not None:
            db.commit()
