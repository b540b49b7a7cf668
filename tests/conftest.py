# tests/conftest.py
"""
Shared fixtures. Every test runs against a fresh in-memory SQLite database;
the API client swaps the app's get_db dependency for sessions on that database.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_KEY"] = ""
os.environ["LOG_TO_FILE"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest_asyncio.fixture
async def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def vehicle_data():
    return {
        "registration_number": "KA-01-AB-1234",
        "make": "Toyota",
        "model": "Corolla",
        "year": 2022,
        "color": "Silver",
        "vehicle_type": "SEDAN",
        "fuel_type": "PETROL",
        "transmission": "AUTOMATIC",
        "seating_capacity": 5,
        "daily_rate": "49.99",
        "mileage": 15000,
    }


@pytest.fixture
def customer_data():
    return {
        "first_name": "Alex",
        "last_name": "Morgan",
        "email": "alex.morgan@example.com",
        "phone": "+1-555-0199",
        "driver_license_number": "DL-998877",
    }
