import datetime
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Callable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from markdown import markdown
from pyinstrument import Profiler
from pyinstrument.renderers.html import HTMLRenderer
from pyinstrument.renderers.speedscope import SpeedscopeRenderer
from starlette.exceptions import HTTPException

from .client.routes import router as client_router
from .contract.routes import router as contract_router
from .core.database.db import get_db_client
from .core.error_handling import (
    general_exception_handler,
    http_exception_handler,
    market_exception_handler,
    validation_exception_handler,
)
from .core.exceptions import MarketError
from .core.models.base import LoggingLevelRequest
from .logging_config import (
    fastapi_logger,
    logger,
    set_logger_and_children_level,
    uvicorn_access_logger,
    uvicorn_logger,
)
from .market.routes import router as market_router
from .order.routes import router as order_router
from .producer.routes import router as producer_router
from .settings import settings

STATIC_DIR_FP = Path(__file__).parent / "static"

descriptions = {}
for desc in ["api", "order"]:
    static_dir = STATIC_DIR_FP / "descriptions" / f"{desc}.md"
    with open(static_dir, "r") as file:
        descriptions[desc] = markdown(file.read())

tags_metadata = [
    {
        "name": "Contract",
        "description": "The administrator-controlled contract holding the energy to credit conversion rate.",
    },
    {
        "name": "Clients",
        "description": "Buyers that bid on credit orders and receive credits when an order is settled.",
    },
    {
        "name": "Producers",
        "description": "Renewable energy suppliers that are awarded credits and sell them through credit orders.",
    },
    {
        "name": "Orders",
        "description": descriptions["order"],
    },
    {
        "name": "Market",
        "description": "Read-only views across the whole ledger.",
    },
]

origins = [
    "http://localhost:8080",
    "http://127.0.0.1:8080",
    "http://localhost:3000",
]
origins.extend(settings.cors_origins)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI application.
    Handles startup and shutdown events.
    """
    logger.info("Starting up application...")
    get_db_client()
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    openapi_tags=tags_metadata,
    title="Carbon Credit Market API",
    description=descriptions["api"],
    version="1.0.0",
    docs_url="/docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
)

app.add_exception_handler(MarketError, market_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(contract_router, prefix="/contract")
app.include_router(client_router, prefix="/client")
app.include_router(producer_router, prefix="/producer")
app.include_router(order_router, prefix="/order")
app.include_router(market_router, prefix="/market")


@app.get("/", tags=["Core"])
async def read_root():
    return {
        "message": "Carbon Credit Market API",
        "version": app.version,
        "endpoints": {
            "initialize_contract": "POST /contract/initialize",
            "register_client": "POST /client/create",
            "register_producer": "POST /producer/create",
            "award_energy": "POST /producer/award_energy",
            "place_order": "POST /order/create",
            "place_bid": "POST /order/bid",
            "settle_order": "POST /order/settle",
            "open_orders": "GET /order/open",
            "summary": "GET /market/summary",
        },
    }


@app.post("/change_log_level", tags=["Core"])
async def change_log_level_endpoint(request: LoggingLevelRequest):
    """Change the logging level at runtime for all relevant loggers."""
    numeric_level = getattr(logging, request.level.value)

    loggers_to_update = [
        logger,
        uvicorn_logger,
        uvicorn_access_logger,
        fastapi_logger,
    ]

    for logger_instance in loggers_to_update:
        set_logger_and_children_level(logger_instance, numeric_level)

    return {
        "message": f"Log level changed to {request.level.value}",
        "logger_status": {
            logger_instance.name: logging.getLevelName(
                logger_instance.getEffectiveLevel()
            )
            for logger_instance in loggers_to_update
        },
    }


if settings.PROFILING_ENABLED:
    profile_type: str = "html"

    @app.middleware("http")
    async def profile_request(request: Request, call_next: Callable):
        """Profile the current request and write the report under core/profiling."""
        profile_type_to_ext = {"html": "html", "speedscope": "speedscope.json"}
        profile_type_to_renderer = {
            "html": HTMLRenderer,
            "speedscope": SpeedscopeRenderer,
        }

        with Profiler(interval=0.001, async_mode="enabled") as profiler:
            response = await call_next(request)

        extension = profile_type_to_ext[profile_type]
        renderer = profile_type_to_renderer[profile_type]()

        todays_date = datetime.datetime.now().strftime("%Y-%m-%d")
        profiling_dir = Path(__file__).parent / "core" / "profiling" / todays_date
        profiling_dir.mkdir(parents=True, exist_ok=True)

        request_name = request.url.path.strip("/").replace("/", "_") or "root"
        with open(Path(profiling_dir, f"{request_name}.{extension}"), "w") as out:
            out.write(profiler.output(renderer=renderer))
        return response


def main():
    uvicorn.run("credit_market.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
