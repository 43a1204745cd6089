# File: multitouch/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    User and Project inherit from this; ``project_members`` is registered
    on the same metadata.
    """
    pass
