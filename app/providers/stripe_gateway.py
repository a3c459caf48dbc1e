"""Thin adapter over the Stripe SDK's balance APIs.

Stripe failures are returned as a ``ProviderFailure`` value instead of being
raised, so callers branch on the result explicitly. Anything that is not a
``stripe.StripeError`` is left to propagate.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import stripe

from ..schemas.stripe_schemas import ListOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderSuccess:
    value: Dict[str, Any]


@dataclass(frozen=True)
class ProviderFailure:
    message: str
    code: Optional[str] = None
    http_status: Optional[int] = None


ProviderResult = Union[ProviderSuccess, ProviderFailure]


def error_message(exc: stripe.StripeError) -> str:
    # user_message omits the "Request req_...:" prefix that str() adds
    return exc.user_message or str(exc)


def failure_from(exc: stripe.StripeError) -> ProviderFailure:
    return ProviderFailure(
        message=error_message(exc),
        code=exc.code,
        http_status=exc.http_status,
    )


def to_json_data(obj: Any) -> Dict[str, Any]:
    if isinstance(obj, stripe.StripeObject):
        return obj.to_dict(for_json=True)
    if isinstance(obj, Mapping):
        return dict(obj)
    return obj


class StripeBalanceGateway:
    def __init__(self, client: stripe.StripeClient):
        self._client = client

    def get_balance(self) -> ProviderResult:
        try:
            balance = self._client.v1.balance.retrieve()
        except stripe.StripeError as e:
            return failure_from(e)
        logger.debug("Retrieved Stripe balance")
        return ProviderSuccess(to_json_data(balance))

    def list_balance_transactions(self, options: ListOptions) -> ProviderResult:
        params: Dict[str, Any] = {"limit": options.limit}
        if options.startingAfter is not None:
            params["starting_after"] = options.startingAfter

        try:
            transactions = self._client.v1.balance_transactions.list(params=params)
        except stripe.StripeError as e:
            return failure_from(e)
        logger.debug(f"Listed Stripe balance transactions with {params}")
        return ProviderSuccess(to_json_data(transactions))
