"""Shared fixtures: a fresh MovieStore and a TestClient wired to it."""

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from api.models.schemas import Director, MovieInput
from api.store import MovieStore


@pytest.fixture
def store():
    return MovieStore()


@pytest.fixture
def client(store):
    """Client for an app with an empty store (no seed data)."""
    with TestClient(create_app(store=store)) as c:
        yield c


@pytest.fixture
def seeded_client():
    """Client for an app built the way production builds it, with sample movies."""
    with TestClient(create_app(seed=True)) as c:
        yield c


@pytest.fixture
def payload():
    return MovieInput(
        isbn="111",
        title="A",
        director=Director(firstname="B", lastname="C"),
    )
