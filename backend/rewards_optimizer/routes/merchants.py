from typing import List, Optional

from fastapi import APIRouter, Depends

from rewards_optimizer.dependencies.services import get_merchant_service
from rewards_optimizer.models.merchant import MerchantResponse
from rewards_optimizer.services.merchant_service import MerchantService

router = APIRouter(
    prefix="/api/merchants",
    tags=["merchants"]
)


@router.get("", response_model=List[MerchantResponse])
def list_merchants(
    name: Optional[str] = None,
    category: Optional[str] = None,
    service: MerchantService = Depends(get_merchant_service),
):
    """
    List merchants.

    Query Parameters:
    - name: case-insensitive substring of the merchant name
    - category: exact category match
    """
    return service.list_merchants(name=name, category=category)
