"""Translation of Stripe failures into the uniform ``{"error": ...}`` response.

Every Stripe error category is answered with 400 Bad Request. Exceptions that
are not Stripe errors are never handled here.
"""

import logging

import stripe
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..providers.stripe_gateway import ProviderFailure, ProviderResult, error_message
from ..schemas.stripe_schemas import ErrorEnvelope

logger = logging.getLogger(__name__)


def error_response(message: str) -> JSONResponse:
    envelope = ErrorEnvelope(error=message)
    return JSONResponse(status_code=400, content=envelope.model_dump())


def provider_response(result: ProviderResult) -> JSONResponse:
    if isinstance(result, ProviderFailure):
        logger.warning(
            f"Stripe request failed (code={result.code}, status={result.http_status}): {result.message}"
        )
        return error_response(result.message)
    return JSONResponse(status_code=200, content=jsonable_encoder(result.value))


async def stripe_exception_handler(request: Request, exc: stripe.StripeError) -> JSONResponse:
    logger.warning(f"Stripe error raised while handling {request.url.path}: {exc!r}")
    return error_response(error_message(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(stripe.StripeError, stripe_exception_handler)
