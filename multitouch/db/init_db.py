"""
Database initialization helpers.

We only wire up the metadata here. Models are imported so their tables
get registered on Base.metadata. Real migrations live outside this package.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from multitouch.db.session import engine as default_engine
from multitouch.models.base import Base

from multitouch.models import project, user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info("Schema ready on %s", bind.url.render_as_string(hide_password=True))


def seed_initial_data(db: Session, *, projects: Optional[list[str]] = None) -> list[int]:
    """
    Insert demo projects (by name) and return their ids.

    Users are never seeded here; they go through the user store.
    """
    ids = []
    for name in projects or []:
        proj = project.Project(name=name)
        db.add(proj)
        db.flush()
        ids.append(proj.id)
    db.commit()
    return ids


def link_project_owner(db: Session, *, uid: int, pid: int) -> None:
    """Record that user ``uid`` owns project ``pid``."""
    db.execute(project.project_members.insert().values(uid=uid, pid=pid))
    db.commit()
