# File: multitouch/services/user_store.py

"""
User store.

Maps user-account requests onto the fixed set of prepared queries in
``UserStatements`` and maps the results back to plain Python values.

Lookups never raise for missing rows: they return ``None``, ``{}``, ``[]``
or ``NOT_FOUND_UID``. Any failure while running a query is raised as
``StorageError`` with the operation name; nothing is retried.

NOTE: passwords are stored and compared as plain strings. Hashing has to
happen before values reach this layer.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from multitouch.core.exceptions import StorageError
from multitouch.db.executor import QueryExecutor, prepare_all
from multitouch.db.statements import UserStatements, build_user_statements

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Returned by the uid lookups when no row matches.
NOT_FOUND_UID = -1

# Username written by the full registration path.
NO_USERNAME = "No Username"

# Value forced into ``extra_field`` on full insert and on update.
PLACEHOLDER_EXTRA_FIELD = "TODO"

# Raised by the DBAPI while binding a bad value (e.g. an int wider than
# the column), outside SQLAlchemy's own exception hierarchy.
PARAMETER_ERRORS = (OverflowError, TypeError, ValueError)


def is_integrity_violation(exc: StorageError) -> bool:
    """True when the write was refused by a schema constraint (e.g. duplicate email)."""
    return isinstance(exc.cause, IntegrityError)


class UserStore:
    def __init__(self, executor: Optional[QueryExecutor], statements: Optional[UserStatements] = None):
        statements = statements or build_user_statements()
        prepared = prepare_all(executor, statements.all())

        self._executor = executor
        self._select_by_username = prepared["selectUserByUsername"]
        self._select_by_email = prepared["selectUserByEmail"]
        self._select_by_uid = prepared["selectUserByUid"]
        self._insert_simple = prepared["insertUserSimple"]
        self._insert_full = prepared["insertUserFull"]
        self._select_pids = prepared["selectPidByUid"]
        self._update_settings = prepared["updateUserSettings"]

    def _run(self, operation: str, call: Callable[[], T]) -> T:
        try:
            return call()
        except (SQLAlchemyError, *PARAMETER_ERRORS) as exc:
            logger.error("%s failed: %s", operation, exc)
            raise StorageError(operation, exc) from exc

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def find_password_by_email(self, email: str) -> Optional[str]:
        row = self._run(
            "find_password_by_email",
            lambda: self._executor.fetch_one(self._select_by_email, {"email": email}),
        )
        if row is None:
            return None
        return row["password"]

    def find_user_id_by_username(self, username: str) -> int:
        row = self._run(
            "find_user_id_by_username",
            lambda: self._executor.fetch_one(self._select_by_username, {"username": username}),
        )
        return NOT_FOUND_UID if row is None else int(row["id"])

    def find_user_id_by_email(self, email: str) -> int:
        row = self._run(
            "find_user_id_by_email",
            lambda: self._executor.fetch_one(self._select_by_email, {"email": email}),
        )
        return NOT_FOUND_UID if row is None else int(row["id"])

    def get_user_profile(self, uid: int) -> dict[str, Any]:
        """
        Return every column of the user row, keyed by column name.

        An empty dict means no row has this id. Check for that before reading
        fields: a present row may still hold None in its optional columns.
        """
        row = self._run(
            "get_user_profile",
            lambda: self._executor.fetch_one(self._select_by_uid, {"uid": uid}),
        )
        return row or {}

    def list_project_ids_for_user(self, uid: int) -> list[int]:
        pids = self._run(
            "list_project_ids_for_user",
            lambda: self._executor.fetch_column(self._select_pids, {"uid": uid}),
        )
        return [int(pid) for pid in pids]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create_basic_user(self, username: str, password: str, email: str) -> int:
        count = self._run(
            "create_basic_user",
            lambda: self._executor.execute(
                self._insert_simple,
                {"username": username, "password": password, "email": email},
            ),
        )
        self._log_insert("create_basic_user", count, email)
        return count

    def create_full_user(self, password: str, email: str, legal_name: str, institution: str) -> int:
        count = self._run(
            "create_full_user",
            lambda: self._executor.execute(
                self._insert_full,
                {
                    "username": NO_USERNAME,
                    "password": password,
                    "legal_name": legal_name,
                    "email": email,
                    "extra_field": PLACEHOLDER_EXTRA_FIELD,
                    "institution": institution,
                },
            ),
        )
        self._log_insert("create_full_user", count, email)
        return count

    def update_user(
        self,
        uid: int,
        username: str,
        password: str,
        email: str,
        legal_name: str,
        institution: str,
    ) -> int:
        """
        Rewrite all settings columns of user ``uid``.

        Returns 0 when no user has that id; that is a no-op, not an error.
        """
        count = self._run(
            "update_user",
            lambda: self._executor.execute(
                self._update_settings,
                {
                    "username": username,
                    "password": password,
                    "legal_name": legal_name,
                    "email": email,
                    "extra_field": PLACEHOLDER_EXTRA_FIELD,
                    "institution": institution,
                    "uid": uid,
                },
            ),
        )
        if count:
            logger.info("Updated settings for user %s", uid)
        else:
            logger.info("No user %s to update", uid)
        return count

    @staticmethod
    def _log_insert(operation: str, count: int, email: str) -> None:
        if count == 0:
            logger.warning("%s inserted no row", operation)
        else:
            logger.info("%s inserted %d row(s)", operation, count)
        logger.debug("%s email=%s", operation, email)
