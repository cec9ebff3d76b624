import os

import pytest
from fastapi.testclient import TestClient

# Settings are read at import time; the app must see credentials before it is imported
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

from kyp_api.main import app  # noqa: E402
from kyp_api.services.products_db import ProductQueryError, get_products_db  # noqa: E402


class FakeProductsDB:
    """Stands in for ProductsDBService; records every filter value it is asked for."""

    def __init__(self, rows=None, error=None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.calls = []

    def fetch_by_gender_target(self, gender_target):
        self.calls.append(gender_target.value)
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def fake_db():
    return FakeProductsDB()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_products_db] = lambda: fake_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def failing_db():
    return FakeProductsDB(error=ProductQueryError('relation "public.products" does not exist'))
