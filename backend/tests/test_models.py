from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from rewards_optimizer.models.credit_card import CreditCard, CreditCardCreate
from rewards_optimizer.models.merchant import Merchant
from rewards_optimizer.models.transaction import Transaction, TransactionCreate
from rewards_optimizer.models.user import User
from rewards_optimizer.services.errors import ValidationError


def _card(**overrides) -> CreditCard:
    fields = dict(
        user=User(username="u1", password="x", email="u1@example.com"),
        card_type="VISA",
        last_four="1234",
        expiry_date="12/26",
        base_reward_rate=Decimal("1.0"),
    )
    fields.update(overrides)
    return CreditCard(**fields)


def test_valid_card_passes_validation():
    _card().validate()


@pytest.mark.parametrize("rate", [Decimal("0"), Decimal("-0.5")])
def test_non_positive_reward_rate_is_rejected(rate):
    with pytest.raises(ValidationError) as excinfo:
        _card(base_reward_rate=rate).validate()
    assert excinfo.value.field == "base_reward_rate"
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize(
    "field_name, value",
    [
        ("card_type", "  "),
        ("last_four", ""),
        ("expiry_date", None),
    ],
)
def test_blank_required_card_fields_are_rejected(field_name, value):
    with pytest.raises(ValidationError) as excinfo:
        _card(**{field_name: value}).validate()
    assert excinfo.value.field == field_name


def test_last_four_longer_than_four_characters_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        _card(last_four="12345").validate()
    assert excinfo.value.field == "last_four"


def test_card_without_owner_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        _card(user=None).validate()
    assert excinfo.value.field == "user"


def test_merchant_name_must_not_be_blank():
    with pytest.raises(ValidationError) as excinfo:
        Merchant(name=" ", category="Food").validate()
    assert excinfo.value.field == "name"


def test_transaction_amount_must_be_positive():
    txn = Transaction(
        user=User(username="u1", password="x", email="u1@example.com"),
        amount=Decimal("0"),
        date=datetime(2026, 1, 1),
    )
    with pytest.raises(ValidationError) as excinfo:
        txn.validate()
    assert excinfo.value.field == "amount"


def test_transaction_reward_fields_default_to_none():
    txn = Transaction(amount=Decimal("5"), date=datetime(2026, 1, 1))
    assert txn.reward_points is None
    assert txn.card_reward_points is None
    assert txn.company_reward_points is None
    assert txn.is_optimal is None


def test_card_payload_accepts_camel_case_keys():
    payload = CreditCardCreate.model_validate(
        {"cardType": "VISA", "lastFour": "1234", "expiryDate": "12/26", "baseRewardRate": 1.5, "logoUrl": "x.png"}
    )
    assert payload.card_type == "VISA"
    assert payload.base_reward_rate == Decimal("1.5")
    assert payload.logo_url == "x.png"
    assert payload.nickname is None


def test_card_payload_rejects_zero_reward_rate():
    with pytest.raises(PydanticValidationError) as excinfo:
        CreditCardCreate.model_validate(
            {"cardType": "VISA", "lastFour": "1234", "expiryDate": "12/26", "baseRewardRate": 0}
        )
    assert excinfo.value.errors()[0]["loc"] == ("baseRewardRate",)


def test_transaction_payload_rejects_negative_amount():
    with pytest.raises(PydanticValidationError):
        TransactionCreate.model_validate({"amount": -3})
