# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from multitouch.api.deps import get_user_store
from multitouch.db.executor import QueryExecutor
from multitouch.db.init_db import init_db
from multitouch.main import app
from multitouch.services.user_store import UserStore


def _sqlite_engine(path):
    return create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def engine(tmp_path):
    eng = _sqlite_engine(tmp_path / "users.db")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def bare_engine(tmp_path):
    """An engine on an empty database: every user query fails."""
    eng = _sqlite_engine(tmp_path / "empty.db")
    yield eng
    eng.dispose()


@pytest.fixture
def executor(engine):
    return QueryExecutor(engine)


@pytest.fixture
def store(executor):
    return UserStore(executor)


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_user_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
