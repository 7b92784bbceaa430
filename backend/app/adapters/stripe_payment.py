from typing import Dict, Optional

import stripe

from app.adapters.errors import PaymentConfigurationError, PaymentProviderError
from app.utils.logging import get_logger

log = get_logger("payments")


class StripePaymentAdapter:
    """
    Thin wrapper around Stripe Checkout.

    The secret key is passed per call rather than set on the stripe module,
    so two adapters with different keys can coexist (tests, multi-tenant).
    """

    def __init__(self, secret_key: Optional[str]):
        self.secret_key = secret_key

    def _key(self) -> str:
        if not self.secret_key:
            raise PaymentConfigurationError("Missing required setting: STRIPE_SECRET_KEY")
        return self.secret_key

    def create_checkout_session(self, params: Dict) -> Dict:
        api_key = self._key()
        try:
            session = stripe.checkout.Session.create(api_key=api_key, **params)
        except stripe.StripeError as e:
            log.error("checkout session create failed: %s", e)
            raise PaymentProviderError(str(e)) from e
        return {"session_id": session.id, "url": session.url}

    def retrieve_checkout_session(self, session_id: str) -> Dict:
        api_key = self._key()
        try:
            session = stripe.checkout.Session.retrieve(session_id, api_key=api_key)
        except stripe.StripeError as e:
            log.error("checkout session %s retrieve failed: %s", session_id, e)
            raise PaymentProviderError(str(e)) from e
        details = getattr(session, "customer_details", None)
        return {
            "session_id": session.id,
            "customer_email": getattr(details, "email", None) if details else None,
            "payment_status": getattr(session, "payment_status", None),
        }

    def health_check(self) -> bool:
        return bool(self.secret_key)
