import logging
from typing import List, Optional

from rewards_optimizer.models.credit_card import CreditCard
from rewards_optimizer.models.user import User
from rewards_optimizer.repositories.credit_card_repository import CreditCardRepository

logger = logging.getLogger(__name__)


class CreditCardService:
    def __init__(self, cards: CreditCardRepository) -> None:
        self.cards = cards

    def get_credit_cards_by_user(self, user: User) -> List[CreditCard]:
        return self.cards.find_by_user_order_by_id_desc(user)

    def get_credit_card_by_id(self, card_id: int) -> Optional[CreditCard]:
        return self.cards.find_by_id(card_id)

    def save_credit_card(self, card: CreditCard) -> CreditCard:
        """Persist ``card`` as given. The owning user must already be attached."""
        saved = self.cards.save(card)
        logger.info("Saved credit card %s for user %s", saved.id, saved.user_id)
        return saved

    def delete_credit_card(self, card_id: int) -> None:
        # No ownership check: any caller may delete any card id.
        self.cards.delete_by_id(card_id)
        logger.info("Deleted credit card %s (if it existed)", card_id)
