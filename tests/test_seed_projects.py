# File: tests/test_seed_projects.py

import pytest
from sqlalchemy.orm import sessionmaker

import seed_projects


@pytest.fixture
def patched_seed(monkeypatch, engine):
    monkeypatch.setattr(seed_projects, "engine", engine)
    monkeypatch.setattr(seed_projects, "SessionLocal", sessionmaker(bind=engine))
    return seed_projects


def test_seed_requires_owner_and_names(patched_seed):
    assert patched_seed.main(["owner@example.com"]) == 2


def test_seed_unknown_owner(patched_seed):
    assert patched_seed.main(["ghost@example.com", "demo"]) == 1


def test_seed_links_projects_to_owner(patched_seed, store):
    store.create_basic_user("pat", "pw", "pat@example.com")
    uid = store.find_user_id_by_email("pat@example.com")

    assert patched_seed.main(["pat@example.com", "wall", "table"]) == 0
    assert len(store.list_project_ids_for_user(uid)) == 2
