from typing import List

from rewards_optimizer.models.merchant import Merchant
from rewards_optimizer.repositories.base import Repository


class MerchantRepository(Repository[Merchant]):
    model = Merchant

    def find_all(self) -> List[Merchant]:
        return self.db.query(Merchant).order_by(Merchant.id.asc()).all()

    def find_by_name_containing_ignore_case(self, text: str) -> List[Merchant]:
        # escape LIKE wildcards so the text is matched literally
        escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return (
            self.db.query(Merchant)
            .filter(Merchant.name.ilike(f"%{escaped}%", escape="\\"))
            .order_by(Merchant.id.asc())
            .all()
        )

    def find_by_category(self, category: str) -> List[Merchant]:
        return (
            self.db.query(Merchant)
            .filter(Merchant.category == category)
            .order_by(Merchant.id.asc())
            .all()
        )
