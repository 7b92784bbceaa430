from fastapi import APIRouter

from app.adapters.errors import PaymentConfigurationError
from app.adapters.payment_factory import get_payment_adapter
from app.catalog import CatalogError, get_catalog

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    catalog_ok = False
    catalog_size = 0
    payment_ok = False
    try:
        catalog_size = len(get_catalog())
        catalog_ok = catalog_size > 0
    except CatalogError:
        catalog_ok = False
    try:
        payment_ok = get_payment_adapter().health_check()
    except PaymentConfigurationError:
        payment_ok = False

    return {
        "status": "ok" if catalog_ok and payment_ok else "degraded",
        "catalog": catalog_ok,
        "catalog_size": catalog_size,
        "payment_adapter": payment_ok,
    }
