from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from rewards_optimizer.db.db import Base
from rewards_optimizer.models.credit_card import CreditCardSummary
from rewards_optimizer.models.merchant import MerchantResponse
from rewards_optimizer.models.user import UserPublic
from rewards_optimizer.services.errors import ValidationError


def _utc_now_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class Transaction(Base):
    __tablename__ = "transactions"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    card_id = Column(Integer, ForeignKey("credit_cards.id", ondelete="SET NULL"), nullable=True)
    merchant_id = Column(Integer, ForeignKey("merchants.id", ondelete="SET NULL"), nullable=True)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(DateTime, default=_utc_now_naive, nullable=False, index=True)

    # Reward columns are stored as given; nothing computes them
    reward_points = Column(Numeric(12, 2), nullable=True)
    card_reward_points = Column(Numeric(12, 2), nullable=True)
    company_reward_points = Column(Numeric(12, 2), nullable=True)
    is_optimal = Column(Boolean, nullable=True)

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transaction_amount_positive"),
        {"sqlite_autoincrement": True},
    )

    user = relationship("User", back_populates="transactions", lazy="joined")
    credit_card = relationship("CreditCard", back_populates="transactions", lazy="joined")
    merchant = relationship("Merchant", lazy="joined")

    def validate(self) -> None:
        if self.user is None and self.user_id is None:
            raise ValidationError("user", "A transaction must belong to a user.")
        if self.amount is None:
            raise ValidationError("amount", "Required.")
        if Decimal(str(self.amount)) <= 0:
            raise ValidationError("amount", "Must be greater than 0.")
        if self.date is None:
            raise ValidationError("date", "Required.")

    def __repr__(self) -> str:
        return f"<Transaction id={self.id} amount={self.amount} date={self.date}>"


# Create Pydantic models for Transaction
class TransactionCreate(BaseModel):
    """Transaction creation request; the owner is the demo user."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    card_id: Optional[int] = Field(None, alias="cardId")
    merchant_id: Optional[int] = Field(None, alias="merchantId")
    amount: Decimal
    date: Optional[datetime] = None  # defaults to now if omitted
    reward_points: Optional[Decimal] = Field(None, alias="rewardPoints")
    card_reward_points: Optional[Decimal] = Field(None, alias="cardRewardPoints")
    company_reward_points: Optional[Decimal] = Field(None, alias="companyRewardPoints")
    is_optimal: Optional[bool] = Field(None, alias="isOptimal")

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v):
        if v <= 0:
            raise ValueError("amount must be greater than 0")
        return v


class TransactionResponse(TransactionCreate):
    """Transaction response model"""
    id: int
    date: datetime
    user: UserPublic
    credit_card: Optional[CreditCardSummary] = Field(None, alias="card")
    merchant: Optional[MerchantResponse] = None

    @field_serializer("amount", "reward_points", "card_reward_points", "company_reward_points")
    def serialize_decimal(self, v: Optional[Decimal]) -> Optional[float]:
        return float(v) if v is not None else None
