from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Column, Integer, String

from rewards_optimizer.db.db import Base
from rewards_optimizer.services.errors import ValidationError


class Merchant(Base):
    __tablename__ = "merchants"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    logo_url = Column(String(255), nullable=True)
    category = Column(String(50), nullable=True, index=True)

    def validate(self) -> None:
        if self.name is None or not self.name.strip():
            raise ValidationError("name", "Must not be blank.")

    def __repr__(self) -> str:
        return f"<Merchant id={self.id} name={self.name!r}>"


class MerchantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    id: int
    name: str
    logo_url: Optional[str] = Field(None, alias="logoUrl")
    category: Optional[str] = None
