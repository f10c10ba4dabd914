from typing import List

from rewards_optimizer.models.credit_card import CreditCard
from rewards_optimizer.models.user import User
from rewards_optimizer.repositories.base import Repository


class CreditCardRepository(Repository[CreditCard]):
    model = CreditCard

    def find_by_user(self, user: User) -> List[CreditCard]:
        return self.find_by_user_order_by_id_desc(user)

    def find_by_user_order_by_id_desc(self, user: User) -> List[CreditCard]:
        """Cards owned by ``user``, most recently created first."""
        return (
            self.db.query(CreditCard)
            .filter(CreditCard.user_id == user.id)
            .order_by(CreditCard.id.desc())
            .all()
        )
