import os
from dotenv import load_dotenv

load_dotenv()

STRIPE_API_KEY = os.getenv("STRIPE_API_KEY")
STRIPE_API_VERSION = os.getenv("STRIPE_API_VERSION") or None
STRIPE_ACCOUNT = os.getenv("STRIPE_ACCOUNT") or None

# Retries are left to callers; the proxy makes exactly one attempt per request.
STRIPE_MAX_NETWORK_RETRIES = int(os.getenv("STRIPE_MAX_NETWORK_RETRIES", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
