class PaymentProviderError(Exception):
    """The payment processor rejected or failed a request."""
    pass

class PaymentConfigurationError(Exception):
    """The adapter is missing credentials it needs to talk to the processor."""
    pass
