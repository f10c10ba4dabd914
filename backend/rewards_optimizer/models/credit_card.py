from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from rewards_optimizer.db.db import Base
from rewards_optimizer.models.user import UserPublic
from rewards_optimizer.services.errors import ValidationError


class CreditCard(Base):
    __tablename__ = "credit_cards"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    card_type = Column(String(50), nullable=False)
    last_four = Column(String(4), nullable=False)
    expiry_date = Column(String, nullable=False)
    base_reward_rate = Column(Numeric(5, 2), nullable=False)
    nickname = Column(String(100), nullable=True)
    issuer = Column(String(100), nullable=True)
    logo_url = Column(String(255), nullable=True)

    __table_args__ = (
        CheckConstraint("base_reward_rate > 0", name="ck_base_reward_rate_positive"),
        {"sqlite_autoincrement": True},
    )

    # Owner is always loaded with the card
    user = relationship("User", back_populates="credit_cards", lazy="joined")
    transactions = relationship("Transaction", back_populates="credit_card", passive_deletes=True)

    def validate(self) -> None:
        """Check declared constraints; raises ValidationError naming the field."""
        if self.user is None and self.user_id is None:
            raise ValidationError("user", "A credit card must belong to a user.")
        for name in ("card_type", "last_four", "expiry_date"):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise ValidationError(name, "Must not be blank.")
        if len(self.last_four) > 4:
            raise ValidationError("last_four", "At most 4 characters.")
        if self.base_reward_rate is None:
            raise ValidationError("base_reward_rate", "Required.")
        if Decimal(str(self.base_reward_rate)) <= 0:
            raise ValidationError("base_reward_rate", "Must be greater than 0.")

    def __repr__(self) -> str:
        return f"<CreditCard id={self.id} type={self.card_type!r} last_four={self.last_four!r}>"


# Pydantic Models for Request/Response
class CreditCardBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    card_type: str = Field(..., alias="cardType", max_length=50)
    last_four: str = Field(..., alias="lastFour", max_length=4)
    expiry_date: str = Field(..., alias="expiryDate")
    base_reward_rate: Decimal = Field(..., alias="baseRewardRate")
    nickname: Optional[str] = None
    issuer: Optional[str] = None
    logo_url: Optional[str] = Field(None, alias="logoUrl")


class CreditCardCreate(CreditCardBase):
    """Card payload as submitted by the client; id and owner are assigned server-side."""

    @field_validator("card_type", "last_four", "expiry_date")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("base_reward_rate")
    @classmethod
    def base_reward_rate_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("baseRewardRate must be greater than 0")
        return v


class CreditCardSummary(CreditCardBase):
    id: int

    @field_serializer("base_reward_rate")
    def serialize_rate(self, v: Decimal) -> float:
        return float(v)


class CreditCardResponse(CreditCardSummary):
    user: UserPublic
