import os

# Point the app at the test database before anything under app/ is imported
os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite://")
os.environ["PERCENT_DISCOUNT_ROUNDING_UNIT"] = "100"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database import Base, SessionLocal, engine
from app.schemas.coupon import CouponCreate
from app.services.application_service import ApplicationService
from app.services.coupon_service import CouponService


@pytest.fixture(autouse=True)
def setup_database():
    """Fresh schema for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_application():
    def _make(name):
        db = SessionLocal()
        try:
            return ApplicationService.create_application(db, name)
        finally:
            db.close()

    return _make


@pytest.fixture
def make_coupon():
    def _make(application, **fields):
        db = SessionLocal()
        try:
            return CouponService.create_coupon(db, application, CouponCreate(**fields))
        finally:
            db.close()

    return _make


@pytest.fixture
def application(make_application):
    return make_application("acme")
