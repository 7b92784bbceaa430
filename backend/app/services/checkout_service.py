from typing import Dict, Optional

from pydantic import ValidationError

from app.adapters.errors import PaymentConfigurationError, PaymentProviderError
from app.config import Settings, settings as default_settings
from app.models.pedal import Pedal
from app.repositories.pedal_repo import PedalRepository
from app.schemas.checkout_schema import CheckoutSessionIn, SessionLookup
from app.utils.logging import get_logger

log = get_logger("checkout")


class CheckoutException(Exception):
    status_code = 500
    public_message = "Unable to create checkout session"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)


class CheckoutValidationError(CheckoutException):
    status_code = 400
    public_message = "Invalid request body"


class UnknownProductError(CheckoutException):
    # same message for missing, sold, coming soon and unpriced pedals
    status_code = 400
    public_message = "Unknown product"


class CheckoutConfigurationError(CheckoutException):
    status_code = 500
    public_message = "Unable to determine site origin"


class UpstreamPaymentError(CheckoutException):
    status_code = 500
    public_message = "Unable to create checkout session"


class CheckoutService:
    def __init__(self, repo: PedalRepository, payment_adapter, settings: Settings = None):
        self.repo = repo
        self.payment_adapter = payment_adapter
        self.settings = settings or default_settings

    def validate_request(self, payload) -> CheckoutSessionIn:
        if not isinstance(payload, dict):
            raise CheckoutValidationError()
        try:
            req = CheckoutSessionIn.model_validate(payload)
        except ValidationError:
            raise CheckoutValidationError()
        if req.quantity > self.settings.CHECKOUT_MAX_QUANTITY:
            raise CheckoutValidationError()
        return req

    def resolve_product(self, slug: str) -> Pedal:
        pedal = self.repo.checkout_eligible(slug)
        if pedal is None:
            raise UnknownProductError()
        return pedal

    def resolve_origin(self, origin_header: Optional[str]) -> str:
        origin = (origin_header or "").strip() or (self.settings.SITE_URL or "").strip()
        if not origin:
            log.error("no Origin header and SITE_URL is not set")
            raise CheckoutConfigurationError()
        return origin.rstrip("/")

    def build_session_params(self, pedal: Pedal, quantity: int, origin: str) -> Dict:
        cfg = self.settings
        return {
            "mode": "payment",
            "line_items": [{"price": pedal.stripe_price_id, "quantity": quantity}],
            "automatic_tax": {"enabled": cfg.AUTOMATIC_TAX},
            "shipping_address_collection": {"allowed_countries": list(cfg.SHIPPING_COUNTRIES)},
            "shipping_options": [
                {
                    "shipping_rate_data": {
                        "display_name": "Standard shipping",
                        "type": "fixed_amount",
                        "fixed_amount": {"amount": cfg.SHIPPING_RATE_CENTS, "currency": "usd"},
                        "delivery_estimate": {
                            "minimum": {"unit": "business_day", "value": 3},
                            "maximum": {"unit": "business_day", "value": 5},
                        },
                        "tax_behavior": "exclusive",
                    }
                }
            ],
            # {CHECKOUT_SESSION_ID} is filled in by the processor
            "success_url": f"{origin}/checkout/success?session_id={{CHECKOUT_SESSION_ID}}",
            "cancel_url": f"{origin}/checkout/cancel",
            "metadata": {"product_slug": pedal.slug, "product_name": pedal.name},
        }

    def create_session(self, payload, origin_header: Optional[str] = None) -> Dict:
        """
        Validate `payload` ({slug, quantity?}), gate it against the catalog and
        hand off to the payment processor.

        Returns {"url", "session_id"}. Raises a CheckoutException subclass;
        nothing is sent upstream unless every check passed.
        """
        req = self.validate_request(payload)
        pedal = self.resolve_product(req.slug)
        origin = self.resolve_origin(origin_header)
        params = self.build_session_params(pedal, req.quantity, origin)

        try:
            session = self.payment_adapter.create_checkout_session(params)
        except PaymentConfigurationError as e:
            log.error("payment adapter misconfigured: %s", e)
            raise CheckoutConfigurationError("Payment processor is not configured")
        except PaymentProviderError as e:
            log.error("checkout for %s x%d failed upstream: %s", pedal.slug, req.quantity, e)
            raise UpstreamPaymentError()

        log.info("checkout session %s created for %s x%d", session.get("session_id"), pedal.slug, req.quantity)
        return {"url": session["url"], "session_id": session.get("session_id")}

    def retrieve_session(self, session_id: Optional[str]) -> SessionLookup:
        """Look up a finished session for the confirmation page. Never raises."""
        if not session_id:
            return SessionLookup(status="missing")
        try:
            data = self.payment_adapter.retrieve_checkout_session(session_id)
        except (PaymentProviderError, PaymentConfigurationError) as e:
            log.warning("could not retrieve checkout session %s: %s", session_id, e)
            return SessionLookup(status="error")
        return SessionLookup(
            status="ok",
            customer_email=data.get("customer_email"),
            payment_status=data.get("payment_status"),
        )
