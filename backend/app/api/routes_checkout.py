from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.adapters.payment_factory import get_payment_adapter
from app.catalog import PedalCatalog, get_catalog
from app.repositories.pedal_repo import PedalRepository
from app.services.checkout_service import (
    CheckoutException,
    CheckoutService,
    CheckoutValidationError,
    UpstreamPaymentError,
)
from app.utils.logging import get_logger

router = APIRouter(tags=["checkout"])
log = get_logger("checkout")


@router.post("/create-checkout-session", summary="Start a hosted checkout for one pedal")
async def create_checkout_session(
    request: Request,
    catalog: PedalCatalog = Depends(get_catalog),
    payment_adapter=Depends(get_payment_adapter),
):
    svc = CheckoutService(PedalRepository(catalog), payment_adapter)
    try:
        try:
            payload = await request.json()
        except ValueError:
            raise CheckoutValidationError()
        # adapters are blocking (stripe-python), keep them off the event loop
        resp = await run_in_threadpool(svc.create_session, payload, request.headers.get("origin"))
        return {"url": resp["url"]}
    except CheckoutException as e:
        return JSONResponse({"error": str(e)}, status_code=e.status_code)
    except Exception:
        log.exception("unexpected error creating checkout session")
        err = UpstreamPaymentError()
        return JSONResponse({"error": str(err)}, status_code=err.status_code)


@router.get("/checkout/session", summary="Look up a finished checkout session")
def get_checkout_session(
    session_id: Optional[str] = Query(None),
    catalog: PedalCatalog = Depends(get_catalog),
    payment_adapter=Depends(get_payment_adapter),
):
    svc = CheckoutService(PedalRepository(catalog), payment_adapter)
    return svc.retrieve_session(session_id).model_dump()
