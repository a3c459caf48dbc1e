import logging
from fastapi import FastAPI
from . import config
from .api.errors import register_error_handlers
from .api.v1.api import api_router
from .schemas.stripe_schemas import HealthResponse

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title="Stripe Balance Proxy")
register_error_handlers(app)

@app.get("/")
def welcome():
    return {
        "message": "Welcome to the Stripe Balance Proxy API!",
        "version": "1.0.0",
        "documentation": "/docs",
        "endpoints": {
            "/": "Overview of all available routes.",
            "/health": "Check API status and whether Stripe credentials are configured.",
            "/stripe/balance": "Get the current Stripe account balance.",
            "/stripe/balance-transactions": "List balance transactions (?limit=10&startingAfter=txn_...)."
        },
        "errors": "Any Stripe error is returned as 400 with a body of the form {\"error\": \"<message>\"}."
    }

@app.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "ok", "stripeConfigured": bool(config.STRIPE_API_KEY)}

app.include_router(api_router)
