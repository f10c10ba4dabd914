import logging
from datetime import datetime, timedelta, UTC
from typing import List, Optional

from rewards_optimizer.models.transaction import Transaction, TransactionCreate
from rewards_optimizer.models.user import User
from rewards_optimizer.repositories.credit_card_repository import CreditCardRepository
from rewards_optimizer.repositories.merchant_repository import MerchantRepository
from rewards_optimizer.repositories.transaction_repository import TransactionRepository
from rewards_optimizer.services.errors import ValidationError

logger = logging.getLogger(__name__)

PERIOD_DAYS = {
    "week": 7,
    "month": 30,
    "year": 365,
}


def _utc_now_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def _to_naive_utc(value: datetime) -> datetime:
    # stored timestamps are naive UTC
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


class TransactionService:
    def __init__(
        self,
        transactions: TransactionRepository,
        cards: CreditCardRepository,
        merchants: MerchantRepository,
    ) -> None:
        self.transactions = transactions
        self.cards = cards
        self.merchants = merchants

    def get_transactions(
        self,
        user: User,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        period: Optional[str] = None,
    ) -> List[Transaction]:
        """
        List a user's transactions, newest first.

        An explicit ``start``/``end`` range wins over ``period``. A missing
        bound is left open. ``period`` is one of week, month or year and
        selects the trailing window ending now.
        """
        if start is not None or end is not None:
            start = _to_naive_utc(start) if start is not None else datetime.min
            end = _to_naive_utc(end) if end is not None else datetime.max
            if start > end:
                raise ValidationError("start", "Must not be after end.")
            return self.transactions.find_by_user_and_date_between(user, start, end)

        if period:
            days = PERIOD_DAYS.get(period.lower())
            if days is None:
                raise ValidationError("period", f"Must be one of: {', '.join(PERIOD_DAYS)}.")
            now = _utc_now_naive()
            return self.transactions.find_by_user_and_date_between(user, now - timedelta(days=days), now)

        return self.transactions.find_by_user(user)

    def create_transaction(self, user: User, payload: TransactionCreate) -> Transaction:
        card = None
        if payload.card_id is not None:
            card = self.cards.find_by_id(payload.card_id)
            if card is None or card.user_id != user.id:
                raise ValidationError("cardId", f"Card {payload.card_id} not found in user wallet.")

        merchant = None
        if payload.merchant_id is not None:
            merchant = self.merchants.find_by_id(payload.merchant_id)
            if merchant is None:
                raise ValidationError("merchantId", f"Merchant {payload.merchant_id} does not exist.")

        record = Transaction(
            user=user,
            credit_card=card,
            merchant=merchant,
            amount=payload.amount,
            date=_to_naive_utc(payload.date) if payload.date else _utc_now_naive(),
            reward_points=payload.reward_points,
            card_reward_points=payload.card_reward_points,
            company_reward_points=payload.company_reward_points,
            is_optimal=payload.is_optimal,
        )
        saved = self.transactions.save(record)
        logger.info("Recorded transaction %s for user %s", saved.id, user.id)
        return saved
