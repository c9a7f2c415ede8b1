# File: app/core/errors.py

"""
Errors raised by the local authentication capability.

Every subclass carries a default message so callers can surface
``str(exc)`` without building their own text.
"""

from typing import Optional


class AuthenticationError(Exception):
    default_message = "Authentication failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class MissingPasswordError(AuthenticationError):
    default_message = "No password was given"


class MissingUsernameError(AuthenticationError):
    default_message = "No username was given"


class UserExistsError(AuthenticationError):
    default_message = "A user with the given username is already registered"


class IncorrectUsernameError(AuthenticationError):
    default_message = "Password or username is incorrect"


class IncorrectPasswordError(AuthenticationError):
    default_message = "Password or username is incorrect"


class NoSaltValueStoredError(AuthenticationError):
    default_message = "Authentication not possible. No salt value stored"


class AttemptTooSoonError(AuthenticationError):
    default_message = "Account is currently locked. Try again later"


class TooManyAttemptsError(AuthenticationError):
    default_message = "Account locked due to too many failed login attempts"


class PasswordValidationError(AuthenticationError):
    default_message = "Password does not meet the requirements"
