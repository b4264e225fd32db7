"""Pytest configuration and fixtures"""
import os

# in-memory sqlite, must be set before market_cart is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from market_cart.data.database import Base, SessionLocal, engine
from market_cart.data.models import (
    CartEntryModel,
    MileageTradeModel,
    PostModel,
    SubCategoryModel,
    UserModel,
)
from market_cart.main import app


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_client():
    return TestClient(app)


@pytest.fixture
def market(db):
    """
    Users 1 and 2, one subcategory, posts:
    10 (50 mileage, by user 2), 11 (30, by user 2), 12 (20, by user 1).
    """
    db.add_all([
        UserModel(id=1, nickname="minji", major="Computer Science"),
        UserModel(id=2, nickname="doyun", major="Business"),
        SubCategoryModel(id=1, subcategory_name="Lecture notes"),
    ])
    db.flush()
    db.add_all([
        PostModel(post_id=10, author_id=2, sub_category_id=1, title="Algorithms summary", post_mileage=50),
        PostModel(post_id=11, author_id=2, sub_category_id=1, title="Accounting notes", post_mileage=30),
        PostModel(post_id=12, author_id=1, sub_category_id=1, title="OS cheat sheet", post_mileage=20),
    ])
    db.commit()
    return db


@pytest.fixture
def add_entry(db):
    def _add(user_id: int, post_id: int, is_active: bool = True) -> int:
        entry = CartEntryModel(user_id=user_id, post_id=post_id, is_active=is_active)
        db.add(entry)
        db.commit()
        return entry.id
    return _add


@pytest.fixture
def add_trade(db):
    def _add(buyer_id: int, seller_id: int, post_id: int):
        db.add(MileageTradeModel(buyer_id=buyer_id, seller_id=seller_id, post_id=post_id))
        db.commit()
    return _add


@pytest.fixture
def fetch_entries(db):
    """Fresh read of a user's cart entries (identity map is not expired on commit)."""
    def _fetch(user_id: int) -> list[CartEntryModel]:
        db.expire_all()
        return (
            db.query(CartEntryModel)
            .filter(CartEntryModel.user_id == user_id)
            .order_by(CartEntryModel.id)
            .all()
        )
    return _fetch
