import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rewards_optimizer import __version__, config
from rewards_optimizer.db.db import Base, SessionLocal, engine
from rewards_optimizer.dependencies.errors import error_payload
from rewards_optimizer.routes import (
    credit_cards_router,
    merchants_router,
    pages_router,
    transactions_router,
    users_router,
)
from rewards_optimizer.services.sample_data import init_sample_data

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler - runs on startup and shutdown"""
    # Startup
    if config.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)
    if config.SEED_SAMPLE_DATA:
        with SessionLocal() as db:
            init_sample_data(db)
    yield
    # Shutdown
    engine.dispose()


app = FastAPI(
    title="Rewards Optimizer API",
    version=__version__,
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# CORS middleware - MUST be added first before other middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


def _jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may hold the raised exception object, which is not JSON serializable
    return [
        {key: value for key, value in err.items() if key != "ctx"}
        for err in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):  # type: ignore[override]
    """Report request validation failures as HTTP 400 naming the offending fields."""
    fields = [".".join(str(part) for part in err["loc"] if part != "body") for err in exc.errors()]
    return JSONResponse(
        status_code=400,
        content=error_payload(
            "VALIDATION_ERROR",
            "Invalid request payload.",
            {"fields": fields, "errors": _jsonable_errors(exc)},
        ),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):  # type: ignore[override]
    """Handle general exceptions - log and return 500 error"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_payload("INTERNAL_SERVER_ERROR", "Internal server error.", {}),
    )


# Register routers
app.include_router(credit_cards_router)
app.include_router(users_router)
app.include_router(merchants_router)
app.include_router(transactions_router)
app.include_router(pages_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
