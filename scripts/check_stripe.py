import json
import os
import sys
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# Add the project root to the python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import config
from app.api.deps import _build_client
from app.providers.stripe_gateway import ProviderFailure, StripeBalanceGateway

def main():
    if not config.STRIPE_API_KEY:
        print("Error: STRIPE_API_KEY is not set.")
        return 1

    print("Retrieving Stripe balance...")
    gateway = StripeBalanceGateway(_build_client(config.STRIPE_API_KEY))
    result = gateway.get_balance()
    if isinstance(result, ProviderFailure):
        print(f"Stripe error ({result.code or 'no code'}): {result.message}")
        return 1

    print(json.dumps(result.value, indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())
