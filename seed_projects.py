"""
Create the schema and seed projects owned by an existing user.

Run this from the backend root:

    (.venv) python seed_projects.py owner@example.com "Demo wall" "Lab table"

The owner must already be registered. Each name becomes a new project row
linked to that user.
"""

import logging
import sys
from typing import Optional, Sequence

from multitouch.core.config import settings
from multitouch.core.logging_config import setup_logging
from multitouch.db.executor import QueryExecutor
from multitouch.db.init_db import init_db, link_project_owner, seed_initial_data
from multitouch.db.session import SessionLocal, engine
from multitouch.services.user_store import NOT_FOUND_UID, UserStore

logger = logging.getLogger("multitouch.seed")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        logger.error("usage: seed_projects.py OWNER_EMAIL PROJECT_NAME [PROJECT_NAME ...]")
        return 2

    owner_email, names = args[0], args[1:]

    init_db(engine)
    store = UserStore(QueryExecutor(engine))

    uid = store.find_user_id_by_email(owner_email)
    if uid == NOT_FOUND_UID:
        logger.error("No user registered with email %s", owner_email)
        return 1

    db = SessionLocal()
    try:
        pids = seed_initial_data(db, projects=names)
        for pid in pids:
            link_project_owner(db, uid=uid, pid=pid)
    finally:
        db.close()

    logger.info("Inserted %d project(s) for user %s", len(pids), uid)
    logger.info("User %s now owns %s", uid, store.list_project_ids_for_user(uid))
    return 0


if __name__ == "__main__":
    setup_logging(settings.log_level)
    sys.exit(main())
