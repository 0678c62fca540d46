import os

# Must be set before the app (and its cached settings) is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from inventory.infrastructure.db import SessionLocal, init_models, drop_models
from inventory.main import app

@pytest.fixture(autouse=True)
def database():
    init_models()
    yield
    drop_models()

@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def make_product(client):
    def _make(**fields):
        body = {"name": "Ladoo", "price": 100, "quantity": 50, "category": "Sweet", "inStock": True}
        body.update(fields)
        resp = client.post("/products", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
