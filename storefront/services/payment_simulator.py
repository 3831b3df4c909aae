"""
storefront/services/payment_simulator.py
Stand-in for a payment processor.

Nothing is contacted. `charge` waits for the configured delay so the
client sees a realistic "processing" pause, and payment references are
fabricated locally.
"""
import asyncio
import logging
import secrets
import time
from decimal import Decimal

from storefront.config.settings import payment_delay_seconds

logger = logging.getLogger(__name__)

PAYMENT_ID_PREFIX = "PAY_"


def new_payment_id() -> str:
    """PAY_<epoch-ms>_<random hex>, unique per order line."""
    return f"{PAYMENT_ID_PREFIX}{int(time.time() * 1000)}_{secrets.token_hex(4)}"


class PaymentSimulator:

    def __init__(self, delay_seconds: float = None):
        self.delay_seconds = payment_delay_seconds() if delay_seconds is None else delay_seconds

    async def charge(self, user_id: int, amount: Decimal) -> None:
        logger.info(f"Simulating payment of {amount} for user {user_id} ({self.delay_seconds}s)")
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
