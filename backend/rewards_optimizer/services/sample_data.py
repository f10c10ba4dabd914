import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from rewards_optimizer.models.credit_card import CreditCard
from rewards_optimizer.models.merchant import Merchant
from rewards_optimizer.models.user import User
from rewards_optimizer.repositories import CreditCardRepository, MerchantRepository, UserRepository
from rewards_optimizer.services.user_service import hash_password

logger = logging.getLogger(__name__)


def init_sample_data(db: Session) -> bool:
    """Seed a demo user, two cards and two merchants if there are no users yet.

    Returns True when data was inserted.
    """
    users = UserRepository(db)
    if users.count() > 0:
        return False

    user = users.save(User(username="testuser", password=hash_password("password123"), email="user@example.com"))

    cards = CreditCardRepository(db)
    cards.save(
        CreditCard(
            user=user,
            card_type="VISA",
            last_four="1234",
            expiry_date="12/26",
            base_reward_rate=Decimal("1.0"),
            nickname="Main card",
            issuer="Rakuten Card",
            logo_url="https://example.com/rakuten-logo.png",
        )
    )
    cards.save(
        CreditCard(
            user=user,
            card_type="MasterCard",
            last_four="5678",
            expiry_date="03/27",
            base_reward_rate=Decimal("0.5"),
            nickname="Sub card",
            issuer="AEON Card",
            logo_url="https://example.com/aeon-logo.png",
        )
    )

    merchants = MerchantRepository(db)
    merchants.save(Merchant(name="Amazon", logo_url="https://example.com/amazon-logo.png", category="Online Shopping"))
    merchants.save(Merchant(name="Seven-Eleven", logo_url="https://example.com/seven-logo.png", category="Convenience Store"))

    logger.info("Sample data initialized for user %s", user.id)
    return True
