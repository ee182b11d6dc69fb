"""
Vibe Cart Application

Demo shopping cart backend: product catalog, a cart for the demo user and
a mock checkout, served as JSON to a single-page client.
"""

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import Settings, get_settings
from .core.errors import ShopError
from .database import init_store
from .database.base import INVALID_LINE_MESSAGE
from .routes import products_router, cart_router, checkout_router, health_router
from .services.cart_view import CartAggregator
from .services.checkout import CheckoutProcessor, generate_receipt_id

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Pick the storage backend once and release it on shutdown"""
    settings: Settings = app.state.settings
    logger.info(f"{settings.app_name} starting up...")

    store = init_store(settings)
    aggregator = CartAggregator(store)
    app.state.store = store
    app.state.aggregator = aggregator
    app.state.checkout = CheckoutProcessor(
        store,
        aggregator=aggregator,
        id_factory=app.state.receipt_id_factory,
    )
    logger.info(f"Storage backend: {store.name}")

    yield

    logger.info(f"{settings.app_name} shutting down...")
    store.close()


async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": INVALID_LINE_MESSAGE})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> FastAPI:
    """Build the application for the given settings"""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Demo shopping cart with a mock checkout",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.receipt_id_factory = id_factory or generate_receipt_id

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include API routers
    app.include_router(products_router, prefix=settings.api_prefix)
    app.include_router(cart_router, prefix=settings.api_prefix)
    app.include_router(checkout_router, prefix=settings.api_prefix)
    app.include_router(health_router, prefix=settings.api_prefix)

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vibe_cart.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
