from typing import Optional

from fastapi import APIRouter, Depends, Query

from ....providers.stripe_gateway import StripeBalanceGateway
from ....schemas.stripe_schemas import ErrorEnvelope, ListOptions
from ...deps import get_balance_gateway
from ...errors import provider_response

router = APIRouter()

error_responses = {400: {"model": ErrorEnvelope, "description": "Stripe rejected the request"}}

@router.get("/balance", responses=error_responses)
def get_balance(gateway: StripeBalanceGateway = Depends(get_balance_gateway)):
    return provider_response(gateway.get_balance())

@router.get("/balance-transactions", responses=error_responses)
def get_balance_transactions(
    limit: int = 10,
    starting_after: Optional[str] = Query(default=None, alias="startingAfter"),
    gateway: StripeBalanceGateway = Depends(get_balance_gateway),
):
    # limit is forwarded as given; Stripe enforces its own bounds
    options = ListOptions(limit=limit, startingAfter=starting_after)
    return provider_response(gateway.list_balance_transactions(options))
