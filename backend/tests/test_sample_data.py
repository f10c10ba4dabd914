from rewards_optimizer.models.credit_card import CreditCard
from rewards_optimizer.models.merchant import Merchant
from rewards_optimizer.models.user import User
from rewards_optimizer.services.sample_data import init_sample_data


def test_seeds_demo_user_cards_and_merchants(db_session):
    assert init_sample_data(db_session) is True

    user = db_session.query(User).one()
    assert user.username == "testuser"
    assert user.password != "password123"
    assert db_session.query(CreditCard).count() == 2
    assert {m.name for m in db_session.query(Merchant).all()} == {"Amazon", "Seven-Eleven"}


def test_seeding_is_skipped_when_users_exist(db_session, demo_user):
    assert init_sample_data(db_session) is False
    assert db_session.query(CreditCard).count() == 0


def test_seeded_data_is_served_by_the_api(client, db_session):
    init_sample_data(db_session)

    body = client.get("/api/credit-cards").json()

    assert [c["lastFour"] for c in body] == ["5678", "1234"]
