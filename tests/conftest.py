"""Shared pytest fixtures and configuration."""

import pytest
from starlette.testclient import TestClient

from todolists.models import Todo, TodoList
from todolists.server import create_app
from todolists.session import TodoSession


@pytest.fixture
def state():
    """An empty session, as seen on a first visit."""
    return TodoSession()


@pytest.fixture
def sample_state():
    """A session with one empty, one complete, and one partly done list."""
    return TodoSession(
        lists=[
            TodoList(name="Groceries"),
            TodoList(
                name="Chores",
                todos=[Todo(name="Dishes", completed=True)],
            ),
            TodoList(
                name="Errands",
                todos=[
                    Todo(name="Bank"),
                    Todo(name="Post office", completed=True),
                    Todo(name="Pharmacy"),
                ],
            ),
        ]
    )


@pytest.fixture
def client():
    """Test client with its own cookie jar, so every test starts a new session."""
    with TestClient(create_app(secret_key="test-secret")) as test_client:
        yield test_client


@pytest.fixture
def make_list(client):
    """Create a list through the HTTP surface and return its index."""
    counter = {"lists": 0}

    def _make(name: str, todos: tuple = ()) -> int:
        response = client.post(
            "/lists", data={"list_name": name}, follow_redirects=False
        )
        assert response.status_code == 303
        index = counter["lists"]
        counter["lists"] += 1
        for todo in todos:
            response = client.post(
                f"/lists/{index}/todos", data={"todo": todo}, follow_redirects=False
            )
            assert response.status_code == 303
        return index

    return _make
