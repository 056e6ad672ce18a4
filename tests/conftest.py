"""
pytest configuration and fixtures.
"""

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from app.config import Settings
from app.db.schema import products
from app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(database_url=f"sqlite:///{tmp_path / 'products.sqlite'}")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    # Entering the client runs the lifespan, which creates the table
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def engine(app, client) -> Engine:
    return app.state.context.engine


@pytest.fixture
def add_products(engine) -> Callable[[int], None]:
    """Insert `count` rows named "Product i" priced (i + 1) * 10."""

    def _add(count: int) -> None:
        if count < 1:
            return
        with engine.begin() as conn:
            conn.execute(
                products.insert(),
                [{"name": f"Product {i}", "price": (i + 1) * 10} for i in range(count)],
            )

    return _add
