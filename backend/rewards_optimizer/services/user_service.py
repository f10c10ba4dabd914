import logging
from typing import Optional

from passlib.context import CryptContext

from rewards_optimizer.config import DEMO_USER_ID
from rewards_optimizer.models.user import User, UserCreate
from rewards_optimizer.repositories.user_repository import UserRepository
from rewards_optimizer.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class UserService:
    def __init__(self, users: UserRepository, demo_user_id: int = DEMO_USER_ID) -> None:
        self.users = users
        self.demo_user_id = demo_user_id

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.users.find_by_id(user_id)

    def get_demo_user(self) -> User:
        """Resolve the fixed account that stands in for an authenticated user."""
        user = self.users.find_by_id(self.demo_user_id)
        if user is None:
            logger.warning("Demo user %s does not exist", self.demo_user_id)
            raise NotFoundError("Demo user not found.", {"user_id": self.demo_user_id})
        return user

    def create_user(self, payload: UserCreate) -> User:
        if self.users.find_by_username(payload.username):
            raise ConflictError("Username already exists.", {"username": payload.username})
        if self.users.find_by_email(payload.email):
            raise ConflictError("Email already exists.", {"email": payload.email})

        user = self.users.save(
            User(
                username=payload.username,
                password=hash_password(payload.password),
                email=payload.email,
            )
        )
        logger.info("Created user %s (%s)", user.id, user.username)
        return user
