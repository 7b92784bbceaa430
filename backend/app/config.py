from pydantic_settings import BaseSettings
from typing import Dict, List, Optional

class Settings(BaseSettings):
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # catalog json shipped with the package unless overridden
    CATALOG_PATH: Optional[str] = None

    # default origin for checkout return urls when the request has no Origin header
    SITE_URL: Optional[str] = None

    PAYMENT_PROVIDER: str = "mock"  # "stripe" or "mock"
    PAYMENT_MOCK_DELAY_MS: int = 200
    STRIPE_SECRET_KEY: Optional[str] = None
    # slug -> stripe price id, e.g. STRIPE_PRICE_IDS='{"tree-fiddy": "price_123"}'
    STRIPE_PRICE_IDS: Dict[str, str] = {}

    CHECKOUT_MAX_QUANTITY: int = 10
    SHIPPING_RATE_CENTS: int = 1200
    SHIPPING_COUNTRIES: List[str] = ["US", "CA"]
    AUTOMATIC_TAX: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
