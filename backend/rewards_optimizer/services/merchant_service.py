from typing import List, Optional

from rewards_optimizer.models.merchant import Merchant
from rewards_optimizer.repositories.merchant_repository import MerchantRepository


class MerchantService:
    def __init__(self, merchants: MerchantRepository) -> None:
        self.merchants = merchants

    def list_merchants(self, name: Optional[str] = None, category: Optional[str] = None) -> List[Merchant]:
        """All merchants, optionally narrowed by a name fragment and/or an exact category."""
        if name:
            results = self.merchants.find_by_name_containing_ignore_case(name)
            if category is not None:
                results = [m for m in results if m.category == category]
            return results
        if category is not None:
            return self.merchants.find_by_category(category)
        return self.merchants.find_all()
