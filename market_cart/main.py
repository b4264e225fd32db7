# market_cart/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from market_cart.api.routers import cart, health
from market_cart.data.database import Base, engine
from market_cart.utils.logging import get_logger, setup_logging
from market_cart.utils.retry import db_retry

#import all models before create_all
from market_cart.data import models  # noqa: F401

logger = get_logger(__name__)


@db_retry()
def init_db():
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Market Cart Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(cart.router)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
