"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_error_handlers, register_routes
from .core import ALLOWED_CORS_ORIGINS, DATA_DIR, PORT, RELOAD, configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("DanceFace backend running on port %s", PORT)
    logger.info("Storing whitelist and leaderboard data in %s", DATA_DIR)
    yield


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="DanceFace Backend", version="0.2.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("danceface.app:app", host="0.0.0.0", port=PORT, reload=RELOAD)


if __name__ == "__main__":
    main()
