from datetime import datetime
from typing import List

from rewards_optimizer.models.transaction import Transaction
from rewards_optimizer.models.user import User
from rewards_optimizer.repositories.base import Repository


class TransactionRepository(Repository[Transaction]):
    model = Transaction

    def find_by_user(self, user: User) -> List[Transaction]:
        return self.find_by_user_order_by_date_desc(user)

    def find_by_user_order_by_date_desc(self, user: User) -> List[Transaction]:
        return (
            self.db.query(Transaction)
            .filter(Transaction.user_id == user.id)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .all()
        )

    def find_by_user_and_date_between(self, user: User, start: datetime, end: datetime) -> List[Transaction]:
        """Transactions with ``start <= date <= end``, newest first."""
        return (
            self.db.query(Transaction)
            .filter(Transaction.user_id == user.id, Transaction.date.between(start, end))
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .all()
        )
