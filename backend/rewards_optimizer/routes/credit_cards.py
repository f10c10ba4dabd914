from typing import List

from fastapi import APIRouter, Depends, Response, status

from rewards_optimizer.dependencies.errors import to_http_exception
from rewards_optimizer.dependencies.services import get_credit_card_service, get_user_service
from rewards_optimizer.models.credit_card import CreditCard, CreditCardCreate, CreditCardResponse
from rewards_optimizer.services.credit_card_service import CreditCardService
from rewards_optimizer.services.errors import NotFoundError, ServiceError
from rewards_optimizer.services.user_service import UserService

router = APIRouter(
    prefix="/api/credit-cards",
    tags=["credit-cards"]
)


@router.get("", response_model=List[CreditCardResponse])
def get_credit_cards(
    users: UserService = Depends(get_user_service),
    service: CreditCardService = Depends(get_credit_card_service),
):
    """
    List the demo user's cards, most recently created first.

    Responds 404 with an empty body when the demo user does not exist.
    """
    try:
        user = users.get_demo_user()
    except NotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return service.get_credit_cards_by_user(user)


@router.post("", response_model=CreditCardResponse)
def create_credit_card(
    payload: CreditCardCreate,
    users: UserService = Depends(get_user_service),
    service: CreditCardService = Depends(get_credit_card_service),
):
    """
    Add a card to the demo user's wallet.

    Request body:
    {
        "cardType": "VISA",
        "lastFour": "1234",
        "expiryDate": "12/26",
        "baseRewardRate": 1.0,
        "nickname": "Main card",
        "issuer": "Rakuten Card",
        "logoUrl": "https://example.com/rakuten-logo.png"
    }
    """
    try:
        user = users.get_demo_user()
    except NotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    card = CreditCard(**payload.model_dump())
    card.user = user
    try:
        return service.save_credit_card(card)
    except ServiceError as exc:
        raise to_http_exception(exc)


@router.delete("/{card_id}")
def delete_credit_card(
    card_id: int,
    service: CreditCardService = Depends(get_credit_card_service),
):
    # Succeeds whether or not the card exists, and regardless of its owner.
    service.delete_credit_card(card_id)
    return Response(status_code=status.HTTP_200_OK)
