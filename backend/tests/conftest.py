from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import rewards_optimizer.models  # noqa: F401  (registers tables on Base.metadata)
from rewards_optimizer.db.db import Base, enable_sqlite_foreign_keys
from rewards_optimizer.dependencies.db import get_db
from rewards_optimizer.main import app
from rewards_optimizer.models.credit_card import CreditCard
from rewards_optimizer.models.merchant import Merchant
from rewards_optimizer.models.transaction import Transaction
from rewards_optimizer.models.user import User


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the lifespan (table creation, seeding) stays off
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db_session):
    def _make_user(user_id: int = 1, username: str = "testuser") -> User:
        user = User(id=user_id, username=username, password="x", email=f"{username}@example.com")
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture()
def make_card(db_session):
    def _make_card(user: User, last_four: str = "1234", **overrides) -> CreditCard:
        fields = dict(
            card_type="VISA",
            last_four=last_four,
            expiry_date="12/26",
            base_reward_rate=Decimal("1.0"),
        )
        fields.update(overrides)
        card = CreditCard(user=user, **fields)
        db_session.add(card)
        db_session.commit()
        return card

    return _make_card


@pytest.fixture()
def make_merchant(db_session):
    def _make_merchant(name: str, category: str | None = None) -> Merchant:
        merchant = Merchant(name=name, category=category)
        db_session.add(merchant)
        db_session.commit()
        return merchant

    return _make_merchant


@pytest.fixture()
def make_transaction(db_session):
    def _make_transaction(user: User, date: datetime, amount: str = "10.00", **overrides) -> Transaction:
        txn = Transaction(user=user, amount=Decimal(amount), date=date, **overrides)
        db_session.add(txn)
        db_session.commit()
        return txn

    return _make_transaction


@pytest.fixture()
def demo_user(make_user) -> User:
    return make_user()
