from .credit_cards import router as credit_cards_router
from .merchants import router as merchants_router
from .pages import router as pages_router
from .transactions import router as transactions_router
from .users import router as users_router

__all__ = [
    "credit_cards_router",
    "merchants_router",
    "pages_router",
    "transactions_router",
    "users_router",
]
