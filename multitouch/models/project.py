# File: multitouch/models/project.py

"""
Project model and the user/project ownership table.

Only the ownership link is read by the user store (``pid`` by ``uid``);
the project columns themselves are owned by other components.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from multitouch.models.base import Base


project_members = Table(
    "project_members",
    Base.metadata,
    Column("uid", Integer, ForeignKey("users.id"), primary_key=True),
    Column("pid", Integer, ForeignKey("projects.id"), primary_key=True),
)


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
