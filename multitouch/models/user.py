# File: multitouch/models/user.py

"""
User model.

Column order matters: the full-registration insert and the settings update
bind their values positionally in this order
(username, password, legal_name, email, extra_field, institution).

Passwords are stored exactly as the caller supplied them. Hashing is not
done at this layer.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from multitouch.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    legal_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, unique=True, index=True)

    # Always written as the "TODO" placeholder; not a real attribute yet.
    extra_field: Mapped[str | None] = mapped_column(String(255), nullable=True)

    institution: Mapped[str | None] = mapped_column(String(255), nullable=True)
