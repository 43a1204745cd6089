# File: multitouch/db/statements.py

"""
The fixed set of named queries the user store runs.

Built once from the model tables and handed to each store explicitly. The
object is immutable, so several stores may share one instance.
"""

from dataclasses import dataclass, fields

from sqlalchemy import Integer, Table, bindparam, insert, select, update

from multitouch.db.executor import QuerySpec
from multitouch.models.project import project_members
from multitouch.models.user import User


@dataclass(frozen=True)
class UserStatements:
    select_user_by_username: QuerySpec
    select_user_by_email: QuerySpec
    select_user_by_uid: QuerySpec
    insert_user_simple: QuerySpec
    insert_user_full: QuerySpec
    select_pid_by_uid: QuerySpec
    update_user_settings: QuerySpec

    def all(self) -> list[QuerySpec]:
        return [getattr(self, f.name) for f in fields(self)]


def build_user_statements(
    users: Table = User.__table__,
    members: Table = project_members,
) -> UserStatements:
    return UserStatements(
        select_user_by_username=QuerySpec(
            "selectUserByUsername",
            select(users).where(users.c.username == bindparam("username")),
            ("username",),
        ),
        select_user_by_email=QuerySpec(
            "selectUserByEmail",
            select(users).where(users.c.email == bindparam("email")),
            ("email",),
        ),
        select_user_by_uid=QuerySpec(
            "selectUserByUid",
            select(users).where(users.c.id == bindparam("uid", type_=Integer)),
            ("uid",),
        ),
        # Insert columns come from the bound parameter names.
        insert_user_simple=QuerySpec(
            "insertUserSimple",
            insert(users),
            ("username", "password", "email"),
        ),
        insert_user_full=QuerySpec(
            "insertUserFull",
            insert(users),
            ("username", "password", "legal_name", "email", "extra_field", "institution"),
        ),
        select_pid_by_uid=QuerySpec(
            "selectPidByUid",
            select(members.c.pid)
            .where(members.c.uid == bindparam("uid", type_=Integer))
            .order_by(members.c.pid),
            ("uid",),
        ),
        update_user_settings=QuerySpec(
            "updateUserSettings",
            update(users).where(users.c.id == bindparam("uid", type_=Integer)),
            ("username", "password", "legal_name", "email", "extra_field", "institution", "uid"),
        ),
    )
