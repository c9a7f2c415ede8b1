# File: app/models/user.py

"""
User model.

Only ``email`` is declared here. Credentials, login throttling state and
the register / authenticate operations come from LocalAuthMixin.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.models.base import Base
from app.models.local_auth import LocalAuthMixin


class User(LocalAuthMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)

    @validates("email")
    def validate_email(self, key, value):
        if value is not None and not value.strip():
            raise ValueError("email is required")
        return value

    def __repr__(self):
        return f"<User {self.username}>"
