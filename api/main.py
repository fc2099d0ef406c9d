# api/main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from staking_tracker import __version__, create_tracker, start_tracker, shutdown_tracker
from staking_tracker.clients.interfaces import ChainReaderInterface
from staking_tracker.core.container import TrackerContainer
from staking_tracker.core.logging import TrackerLogger, log_with_context, INFO
from staking_tracker.database.store import StakingStore

from .routers import staking
from .dependencies import set_dependencies, clear_dependencies, get_container


def create_app(container: Optional[TrackerContainer] = None) -> FastAPI:
    """Create the API; without a container one is built from the environment at startup"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        tracker = container or create_tracker()
        start_tracker(tracker)
        set_dependencies(tracker)

        logger = TrackerLogger.get_logger('api.main')
        log_with_context(logger, INFO, "API startup completed",
                        chain_label=tracker.config.chain_label)

        yield

        logger.info("API shutting down")
        clear_dependencies()
        await shutdown_tracker(tracker)

    app = FastAPI(
        title="Staking Tracker API",
        description="Staking APY and TVL for tracked tokens",
        version=__version__,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    app.include_router(staking.router, prefix="/staking", tags=["staking"])

    @app.get("/health")
    async def health_check():
        tracker = get_container()
        database_connected = await tracker.get(StakingStore).health_check()
        node_connected = await tracker.get(ChainReaderInterface).is_connected()
        return {
            "status": "healthy" if database_connected and node_connected else "degraded",
            "database_connected": database_connected,
            "node_connected": node_connected,
        }

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "Staking Tracker API",
            "version": __version__,
            "endpoints": {
                "health": "/health",
                "staking": "/staking",
                "by_protocol": "/staking/{protocol_id}",
                "by_address": "/staking/address/{address}",
                "update": "/staking/update",
                "docs": "/docs"
            }
        }

    return app


app = create_app()
