from fastapi import Depends
from sqlalchemy.orm import Session

from rewards_optimizer.dependencies.db import get_db
from rewards_optimizer.repositories import (
    CreditCardRepository,
    MerchantRepository,
    TransactionRepository,
    UserRepository,
)
from rewards_optimizer.services.credit_card_service import CreditCardService
from rewards_optimizer.services.merchant_service import MerchantService
from rewards_optimizer.services.transaction_service import TransactionService
from rewards_optimizer.services.user_service import UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_credit_card_service(db: Session = Depends(get_db)) -> CreditCardService:
    return CreditCardService(CreditCardRepository(db))


def get_merchant_service(db: Session = Depends(get_db)) -> MerchantService:
    return MerchantService(MerchantRepository(db))


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    # Repositories share the request session so a request is one unit of work
    return TransactionService(
        TransactionRepository(db),
        CreditCardRepository(db),
        MerchantRepository(db),
    )
