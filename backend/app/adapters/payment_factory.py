from functools import lru_cache

from app.adapters.errors import PaymentConfigurationError
from app.adapters.mock_payment import MockPaymentAdapter
from app.adapters.stripe_payment import StripePaymentAdapter
from app.config import Settings, settings


def build_payment_adapter(cfg: Settings):
    provider = (cfg.PAYMENT_PROVIDER or "").lower()
    if provider == "stripe":
        return StripePaymentAdapter(cfg.STRIPE_SECRET_KEY)
    if provider == "mock":
        return MockPaymentAdapter(delay_ms=cfg.PAYMENT_MOCK_DELAY_MS)
    raise PaymentConfigurationError(f"Unknown PAYMENT_PROVIDER: {cfg.PAYMENT_PROVIDER!r}")


@lru_cache(maxsize=1)
def get_payment_adapter():
    return build_payment_adapter(settings)
