from typing import Optional

from rewards_optimizer.models.user import User
from rewards_optimizer.repositories.base import Repository


class UserRepository(Repository[User]):
    model = User

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()
