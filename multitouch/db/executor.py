# File: multitouch/db/executor.py

"""
Query executor.

Owns the engine and runs named, parameterized statements against it. Every
call checks out its own connection inside ``engine.begin()`` so writes are
committed and results are fully consumed before the connection goes back to
the pool, whatever the outcome.

Preparation compiles each statement once against the engine's dialect and
checks its bind parameters. SQLAlchemy's compiled cache then reuses that
compiled form on every execution.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.sql.base import Executable

from multitouch.core.exceptions import StoreInitializationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuerySpec:
    """A named statement and the parameters it takes, in positional order."""

    name: str
    statement: Executable
    params: tuple[str, ...]


@dataclass(frozen=True)
class PreparedQuery:
    name: str
    statement: Executable
    params: tuple[str, ...]
    sql: str


class QueryExecutor:
    """Runs prepared queries and returns scalars, rows or affected-row counts."""

    def __init__(self, engine: Optional[Engine]):
        self.engine = engine

    def prepare(self, spec: QuerySpec) -> PreparedQuery:
        if self.engine is None:
            raise StoreInitializationError(f"no engine available to prepare {spec.name}")

        try:
            compiled = spec.statement.compile(
                dialect=self.engine.dialect,
                column_keys=list(spec.params),
            )
        except SQLAlchemyError as exc:
            raise StoreInitializationError(f"could not prepare {spec.name}: {exc}") from exc

        expected = set(spec.params)
        bound = set(compiled.binds)
        if bound != expected:
            raise StoreInitializationError(
                f"{spec.name} binds {sorted(bound)}, expected {sorted(expected)}"
            )

        logger.debug("Prepared %s: %s", spec.name, compiled)
        return PreparedQuery(spec.name, spec.statement, spec.params, str(compiled))

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def fetch_one(self, query: PreparedQuery, params: Mapping[str, Any]) -> Optional[dict]:
        """First row as a column -> value dict, or None when nothing matched."""
        bound = self._bind(query, params)
        with self.engine.begin() as conn:
            row = conn.execute(query.statement, bound).mappings().first()
        return dict(row) if row is not None else None

    def fetch_column(self, query: PreparedQuery, params: Mapping[str, Any]) -> list:
        """First column of every row, in the order the database returns them."""
        bound = self._bind(query, params)
        with self.engine.begin() as conn:
            return list(conn.execute(query.statement, bound).scalars().all())

    def execute(self, query: PreparedQuery, params: Mapping[str, Any]) -> int:
        """Run a write statement and return the number of affected rows."""
        bound = self._bind(query, params)
        with self.engine.begin() as conn:
            result = conn.execute(query.statement, bound)
            return result.rowcount

    def _bind(self, query: PreparedQuery, params: Mapping[str, Any]) -> dict:
        if set(params) != set(query.params):
            raise ArgumentError(
                f"{query.name} expects parameters {list(query.params)}, got {sorted(params)}"
            )
        logger.debug("Executing %s", query.name)
        return {name: params[name] for name in query.params}


def prepare_all(executor: Optional[QueryExecutor], specs: Sequence[QuerySpec]) -> dict[str, PreparedQuery]:
    """Prepare every spec, failing on the first one that cannot be prepared."""
    if executor is None:
        raise StoreInitializationError("no query executor supplied")
    return {spec.name: executor.prepare(spec) for spec in specs}
