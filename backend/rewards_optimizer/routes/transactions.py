from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from rewards_optimizer.dependencies.errors import to_http_exception
from rewards_optimizer.dependencies.services import get_transaction_service, get_user_service
from rewards_optimizer.models.transaction import TransactionCreate, TransactionResponse
from rewards_optimizer.services.errors import ServiceError
from rewards_optimizer.services.transaction_service import TransactionService
from rewards_optimizer.services.user_service import UserService

router = APIRouter(
    prefix="/api/transactions",
    tags=["transactions"]
)


@router.get("", response_model=List[TransactionResponse])
def list_transactions(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    period: Optional[str] = None,
    users: UserService = Depends(get_user_service),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    List the demo user's transactions, newest first.

    Query Parameters:
    - start, end: inclusive ISO-8601 bounds on the transaction date
    - period: "week", "month" or "year"; ignored when start or end is given
    """
    try:
        user = users.get_demo_user()
        return service.get_transactions(user, start=start, end=end, period=period)
    except ServiceError as exc:
        raise to_http_exception(exc)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TransactionResponse)
def create_transaction(
    payload: TransactionCreate,
    users: UserService = Depends(get_user_service),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Record a purchase for the demo user.

    Request body:
    {
        "cardId": 1,
        "merchantId": 2,
        "amount": 12.50,
        "date": "2026-02-18T10:30:00"
    }
    """
    try:
        user = users.get_demo_user()
        return service.create_transaction(user, payload)
    except ServiceError as exc:
        raise to_http_exception(exc)
