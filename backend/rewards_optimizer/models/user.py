from datetime import datetime, UTC

from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from rewards_optimizer.db.db import Base
from rewards_optimizer.services.errors import ValidationError


def _utc_now_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    email = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime, default=_utc_now_naive, nullable=False)

    # Relationships with credit cards and transactions
    credit_cards = relationship("CreditCard", back_populates="user", cascade="all, delete-orphan")
    transactions = relationship("Transaction", back_populates="user", cascade="all, delete-orphan")

    def validate(self) -> None:
        for name in ("username", "password", "email"):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise ValidationError(name, "Must not be blank.")

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"


# Pydantic Models for Request/Response Validation
class UserBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    username: str = Field(..., max_length=50)
    email: str = Field(..., max_length=100)

    @field_validator("username", "email")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


# password only on the create model so it is never exposed in responses
class UserCreate(UserBase):
    password: str = Field(..., min_length=1)


class UserPublic(UserBase):
    id: int


class UserResponse(UserPublic):
    created_at: datetime = Field(..., alias="createdAt")
