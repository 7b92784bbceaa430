from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.adapters.errors import PaymentConfigurationError
from app.api.health import router as health_router
from app.api.routes_checkout import router as checkout_router
from app.api.routes_pedals import router as pedals_router
from app.catalog import init_catalog
from app.config import settings
from app.utils.logging import get_logger

log = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup: the catalog is loaded once and never changes afterwards
    init_catalog()
    yield


app = FastAPI(title="Brown Bear Pedals - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PaymentConfigurationError)
async def payment_configuration_error(request: Request, exc: PaymentConfigurationError):
    log.error("payment configuration error on %s: %s", request.url.path, exc)
    return JSONResponse({"error": "Payment processor is not configured"}, status_code=500)


app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(pedals_router, prefix="/api/pedals", tags=["pedals"])

app.include_router(checkout_router, prefix="/api", tags=["checkout"])
