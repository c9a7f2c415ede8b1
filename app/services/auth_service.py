# File: app/services/auth_service.py

"""
Authentication service.

Call sites for the local authentication capability attached to User:
  - Registering a new account
  - Checking a username / password pair
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError
from app.models.user import User

logger = logging.getLogger(__name__)


def register_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
) -> User:
    """
    Create and persist a user. Raises AuthenticationError subclasses
    (UserExistsError, MissingPasswordError, ...) unchanged.
    """
    return User.register(db, User(username=username, email=email), password)


def authenticate_user(
    db: Session,
    *,
    username: str,
    password: str,
) -> Optional[User]:
    """
    Return the user when the credentials match, otherwise None.
    """
    try:
        return User.authenticate_by_username(db, username, password)
    except AuthenticationError as exc:
        logger.info(
            "Authentication rejected",
            extra={"username": username, "reason": type(exc).__name__},
        )
        return None
