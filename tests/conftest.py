"""
Shared pytest fixtures for the Todo API test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing a fresh store for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Store setup/teardown
- Test client creation
"""

import os
import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app, get_store
from app.models import Todo, TodoPatch, TodoStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The 'session' scope means the same app instance (and store) is
    reused for all tests; the todo_store fixture empties it per test.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def todo_store(app) -> TodoStore:
    """
    Provide the application's store, empty, for each test.

    The store is reset before the test so ids start at 1, and again
    afterwards so no todos leak into the next test.

    Args:
        app: Flask application fixture.

    Yields:
        The TodoStore the API handlers operate on.
    """
    with app.app_context():
        store = get_store()
    store.reset()
    yield store
    store.reset()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def todo_factory(todo_store):
    """
    Factory fixture for creating Todo records in the store.

    Args:
        todo_store: Store fixture.

    Returns:
        Function that creates and returns Todo instances.

    Example:
        def test_something(todo_factory):
            todo = todo_factory(name="My Todo")
            assert todo.id == 1
    """

    def _create_todo(name: str | None = None, completed: bool = False) -> Todo:
        """
        Create a todo with the given or default values.

        Args:
            name: Todo name (defaults to random sentence).
            completed: Completion flag applied after creation.

        Returns:
            Created Todo as stored.
        """
        todo = todo_store.create(name or fake.sentence(nb_words=3))
        if completed:
            todo = todo_store.update(todo.id, TodoPatch(completed=True))
        return todo

    return _create_todo


@pytest.fixture
def sample_todo(todo_factory) -> Todo:
    """
    Create a single sample todo for tests that need one record.

    Returns:
        A single Todo instance.
    """
    return todo_factory(name="Sample Todo")


@pytest.fixture
def multiple_todos(todo_factory) -> list[Todo]:
    """
    Create several todos with mixed completion state.

    Returns:
        List of Todo instances in creation order.
    """
    return [
        todo_factory(name="Clean Car"),
        todo_factory(name="Clean Room", completed=True),
        todo_factory(name="Buy Milk"),
        todo_factory(name="Walk Dog"),
    ]


# -----------------------------------------------------------------------------
# API Helper Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def api_base_url() -> str:
    """
    Provide the base URL for todo endpoints.

    Returns:
        Base URL string for API routes.
    """
    return "/v1/todos"


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
