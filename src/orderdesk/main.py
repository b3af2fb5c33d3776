import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from tortoise import Tortoise
from tortoise.contrib.fastapi import tortoise_exception_handlers

from .core import config
from .core.logging_config import setup_logging
from .features.clients.router import router as clients_router
from .features.products.router import router as products_router
from .features.orders.router import router as orders_router
from .features.order_details.router import router as order_details_router
from .features.reports import router as reports

setup_logging()
logger = logging.getLogger("orderdesk.main")  # This logger will inherit from 'orderdesk'


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown events, such as connecting to the database.
    """
    logger.info("Starting application...")
    await Tortoise.init(config=config.TORTOISE_ORM_CONFIG)
    if config.GENERATE_SCHEMAS:
        await Tortoise.generate_schemas(safe=True)
    logger.info("Tortoise-ORM has been initialized.")

    yield

    await Tortoise.close_connections()
    logger.info("Tortoise-ORM connections have been closed.")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answers malformed path ids, query parameters and bodies with 400 instead of 422."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app = FastAPI(
    title="Orderdesk API",
    description="API for clients, products and orders, with sales reports.",
    version="0.1.0",
    exception_handlers={
        **tortoise_exception_handlers(),
        RequestValidationError: request_validation_handler,
    },
    lifespan=lifespan,
)


@app.get("/")
async def read_root(request: Request):
    """
    Root endpoint for the API.
    """
    client_host = request.client.host if request.client else "unknown client"
    logger.info(f"Root endpoint '/' accessed by {client_host}")
    return {"message": "Welcome to the Orderdesk API!"}


# Report routers first: their fixed segments must win over the CRUD "/{id}" routes
app.include_router(reports.clients_router, prefix=config.API_PREFIX)
app.include_router(reports.orders_router, prefix=config.API_PREFIX)
app.include_router(reports.products_router, prefix=config.API_PREFIX)
app.include_router(clients_router, prefix=config.API_PREFIX)
app.include_router(products_router, prefix=config.API_PREFIX)
app.include_router(orders_router, prefix=config.API_PREFIX)
app.include_router(order_details_router, prefix=config.API_PREFIX)
