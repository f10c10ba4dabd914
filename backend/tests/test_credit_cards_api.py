from decimal import Decimal

from rewards_optimizer.models.credit_card import CreditCard


CARD_PAYLOAD = {
    "cardType": "VISA",
    "lastFour": "1234",
    "expiryDate": "12/26",
    "baseRewardRate": 1.0,
}


def test_created_card_is_listed_for_demo_user(client, demo_user):
    create = client.post("/api/credit-cards", json=CARD_PAYLOAD)
    assert create.status_code == 200, create.text
    created = create.json()
    assert created["id"] is not None
    assert created["user"] == {"id": 1, "username": "testuser", "email": "testuser@example.com"}

    response = client.get("/api/credit-cards")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    card = body[0]
    assert card["id"] == created["id"]
    assert card["cardType"] == "VISA"
    assert card["lastFour"] == "1234"
    assert card["expiryDate"] == "12/26"
    assert card["baseRewardRate"] == 1.0
    assert set(card) == {
        "id", "user", "cardType", "lastFour", "expiryDate",
        "baseRewardRate", "nickname", "issuer", "logoUrl",
    }


def test_list_without_demo_user_returns_empty_404(client):
    response = client.get("/api/credit-cards")
    assert response.status_code == 404
    assert response.content == b""


def test_create_without_demo_user_returns_empty_404(client, db_session):
    response = client.post("/api/credit-cards", json=CARD_PAYLOAD)
    assert response.status_code == 404
    assert response.content == b""
    assert db_session.query(CreditCard).count() == 0


def test_cards_are_listed_newest_first(client, demo_user):
    ids = []
    for last_four in ("1111", "2222", "3333"):
        resp = client.post("/api/credit-cards", json={**CARD_PAYLOAD, "lastFour": last_four})
        ids.append(resp.json()["id"])

    body = client.get("/api/credit-cards").json()

    assert [c["id"] for c in body] == list(reversed(ids))
    assert [c["lastFour"] for c in body] == ["3333", "2222", "1111"]


def test_client_supplied_id_and_user_are_ignored(client, demo_user, make_user):
    make_user(user_id=2, username="other")
    payload = {**CARD_PAYLOAD, "id": 99, "user": {"id": 2}}

    created = client.post("/api/credit-cards", json=payload).json()

    assert created["id"] != 99
    assert created["user"]["id"] == 1


def test_zero_reward_rate_is_rejected_before_persisting(client, demo_user, db_session):
    response = client.post("/api/credit-cards", json={**CARD_PAYLOAD, "baseRewardRate": 0})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "baseRewardRate" in error["details"]["fields"]
    assert db_session.query(CreditCard).count() == 0


def test_last_four_longer_than_four_is_rejected(client, demo_user):
    response = client.post("/api/credit-cards", json={**CARD_PAYLOAD, "lastFour": "12345"})

    assert response.status_code == 400
    assert "lastFour" in response.json()["error"]["details"]["fields"]


def test_missing_card_type_is_rejected(client, demo_user):
    payload = {k: v for k, v in CARD_PAYLOAD.items() if k != "cardType"}

    response = client.post("/api/credit-cards", json=payload)

    assert response.status_code == 400
    assert "cardType" in response.json()["error"]["details"]["fields"]


def test_delete_removes_card(client, demo_user, db_session):
    card_id = client.post("/api/credit-cards", json=CARD_PAYLOAD).json()["id"]

    response = client.delete(f"/api/credit-cards/{card_id}")

    assert response.status_code == 200
    assert response.content == b""
    db_session.expire_all()
    assert db_session.get(CreditCard, card_id) is None


def test_delete_missing_card_still_succeeds(client, demo_user):
    response = client.delete("/api/credit-cards/4242")
    assert response.status_code == 200


def test_delete_card_of_another_user_succeeds(client, demo_user, make_user, make_card, db_session):
    other = make_user(user_id=2, username="other")
    card = make_card(other, base_reward_rate=Decimal("0.5"))
    card_id = card.id

    response = client.delete(f"/api/credit-cards/{card_id}")

    assert response.status_code == 200
    db_session.expire_all()
    assert db_session.get(CreditCard, card_id) is None


def test_recreated_card_gets_fresh_id_and_old_transactions_stay_detached(client, demo_user):
    first_id = client.post("/api/credit-cards", json=CARD_PAYLOAD).json()["id"]
    txn = client.post("/api/transactions", json={"cardId": first_id, "amount": 20})
    assert txn.status_code == 201, txn.text

    assert client.delete(f"/api/credit-cards/{first_id}").status_code == 200
    second_id = client.post("/api/credit-cards", json={**CARD_PAYLOAD, "lastFour": "9999"}).json()["id"]

    assert second_id > first_id
    body = client.get("/api/transactions").json()
    assert len(body) == 1
    assert body[0]["card"] is None


def test_long_expiry_string_is_accepted(client, demo_user):
    response = client.post("/api/credit-cards", json={**CARD_PAYLOAD, "expiryDate": "December 2026"})

    assert response.status_code == 200, response.text
    assert response.json()["expiryDate"] == "December 2026"
