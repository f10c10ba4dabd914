from .credit_card_repository import CreditCardRepository
from .merchant_repository import MerchantRepository
from .transaction_repository import TransactionRepository
from .user_repository import UserRepository

__all__ = [
    "CreditCardRepository",
    "MerchantRepository",
    "TransactionRepository",
    "UserRepository",
]
