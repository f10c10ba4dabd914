from .user import User, UserCreate, UserPublic, UserResponse
from .credit_card import CreditCard, CreditCardCreate, CreditCardResponse, CreditCardSummary
from .merchant import Merchant, MerchantResponse
from .transaction import Transaction, TransactionCreate, TransactionResponse

__all__ = [
    "User",
    "UserCreate",
    "UserPublic",
    "UserResponse",
    "CreditCard",
    "CreditCardCreate",
    "CreditCardResponse",
    "CreditCardSummary",
    "Merchant",
    "MerchantResponse",
    "Transaction",
    "TransactionCreate",
    "TransactionResponse",
]
