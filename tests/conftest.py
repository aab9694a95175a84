import sys
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

sys.path.append(str(Path(__file__).parents[1] / "src"))

from expense_tracker.categorization.suggestion import LearningLog
from expense_tracker.main import create_app
from expense_tracker.repositories.expense import InMemoryExpenseRepository


@pytest.fixture
def repository() -> InMemoryExpenseRepository:
    """Fresh in-memory expense store per test."""
    return InMemoryExpenseRepository()


@pytest.fixture
def learning_log() -> LearningLog:
    return LearningLog()


@pytest.fixture
def app(repository, learning_log):
    return create_app(repository=repository, learning_log=learning_log)


@pytest.fixture
async def client(app):
    """Provide test client bound to a fresh app instance."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
