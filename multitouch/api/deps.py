# File: multitouch/api/deps.py

from functools import lru_cache

from multitouch.db.executor import QueryExecutor
from multitouch.db.session import engine
from multitouch.services.user_store import UserStore


@lru_cache
def get_user_store() -> UserStore:
    """
    FastAPI dependency that provides the process-wide user store.

    Queries are prepared on first use. Tests swap this out through
    ``app.dependency_overrides``.

    Usage in route functions:
        store: UserStore = Depends(get_user_store)
    """
    return UserStore(QueryExecutor(engine))
