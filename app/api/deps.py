from functools import lru_cache

import stripe
from fastapi import Depends, HTTPException

from .. import config
from ..providers.stripe_gateway import StripeBalanceGateway


@lru_cache()
def _build_client(api_key: str) -> stripe.StripeClient:
    return stripe.StripeClient(
        api_key,
        stripe_account=config.STRIPE_ACCOUNT,
        stripe_version=config.STRIPE_API_VERSION,
        max_network_retries=config.STRIPE_MAX_NETWORK_RETRIES,
    )


def get_stripe_client() -> stripe.StripeClient:
    if not config.STRIPE_API_KEY:
        raise HTTPException(status_code=503, detail="Stripe API key is not configured")
    return _build_client(config.STRIPE_API_KEY)


def get_balance_gateway(client: stripe.StripeClient = Depends(get_stripe_client)) -> StripeBalanceGateway:
    return StripeBalanceGateway(client)
