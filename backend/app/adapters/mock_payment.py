import time
from uuid import uuid4
from typing import Dict, List, Optional

from app.adapters.errors import PaymentProviderError


class MockPaymentAdapter:
    """
    In-process stand-in for the hosted checkout processor.

    Every create call is recorded in `created` so tests can assert exactly
    what would have been sent upstream. Set `fail_with` to make the next
    calls raise PaymentProviderError.
    """

    checkout_base_url = "https://checkout.mock.local/c/pay"

    def __init__(self, delay_ms: int = 200, fail_with: Optional[str] = None):
        # Convert delay from milliseconds to seconds for time.sleep
        self.delay_seconds = delay_ms / 1000.0
        self.fail_with = fail_with
        self.created: List[Dict] = []
        self.sessions: Dict[str, Dict] = {}

    def create_checkout_session(self, params: Dict) -> Dict:
        # simulate gateway latency
        time.sleep(self.delay_seconds)
        if self.fail_with:
            raise PaymentProviderError(self.fail_with)
        self.created.append(params)
        session_id = f"cs_mock_{uuid4().hex[:24]}"
        self.sessions[session_id] = {
            "session_id": session_id,
            "customer_email": "buyer@example.com",
            "payment_status": "paid",
        }
        return {"session_id": session_id, "url": f"{self.checkout_base_url}/{session_id}"}

    def retrieve_checkout_session(self, session_id: str) -> Dict:
        time.sleep(self.delay_seconds)
        if self.fail_with:
            raise PaymentProviderError(self.fail_with)
        session = self.sessions.get(session_id)
        if session is None:
            raise PaymentProviderError(f"No such checkout.session: {session_id}")
        return session

    def health_check(self) -> bool:
        return True
