"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

from app.db.session import engine
from app.models.base import Base
from app.models import user  # noqa: F401


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
