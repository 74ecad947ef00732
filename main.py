from __future__ import annotations

import logging
import os
import socket
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi import Query, Path

from models.health import Health
from routers.grapes import build_grapes_router
from routers.hateoas_grapes import build_hateoas_grapes_router
from routers.hub import build_hub_router
from config.logging import setup_logging
from config.settings import settings

from services.database import AsyncSessionLocal, init_db, close_db
from services.grapes import GrapeService
from services.hub import HubService
from services.results import GrapeStore

port = int(os.environ.get("FASTAPIPORT", 8000))

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Health endpoints
# -----------------------------------------------------------------------------

def make_health(echo: Optional[str], path_echo: Optional[str]=None) -> Health:
    return Health(
        status=200,
        status_message="OK",
        timestamp=datetime.now(timezone.utc).isoformat(),
        ip_address=socket.gethostbyname(socket.gethostname()),
        echo=echo,
        path_echo=path_echo
    )


# -----------------------------------------------------------------------------
# Application factory
# -----------------------------------------------------------------------------

def create_app(
    grape_service: Optional[GrapeStore] = None,
    hub_service: Optional[HubService] = None,
) -> FastAPI:
    """
    Build the API with its collaborators.
    Defaults to database-backed storage and a fresh WebSocket hub.
    """
    uses_database = grape_service is None
    grape_service = grape_service or GrapeService(AsyncSessionLocal)
    hub_service = hub_service or HubService()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        if uses_database:
            await init_db()
        logger.info("Grapes API started (environment=%s)", settings.ENVIRONMENT)
        yield
        if uses_database:
            await close_db()
        logger.info("Grapes API stopped")

    app = FastAPI(
        title="Grapes Microservice",
        description="FastAPI microservice exposing grapes with HATEOAS links and live change notifications.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=Health)
    def get_health_no_path(echo: str | None = Query(None, description="Optional echo string")):
        # Works because path_echo is optional in the model
        return make_health(echo=echo, path_echo=None)

    @app.get("/health/{path_echo}", response_model=Health)
    def get_health_with_path(
        path_echo: str = Path(..., description="Required echo in the URL path"),
        echo: str | None = Query(None, description="Optional echo string"),
    ):
        return make_health(echo=echo, path_echo=path_echo)

    # -------------------------------------------------------------------------
    # Routers to public RESTful resources
    # -------------------------------------------------------------------------

    app.include_router(router=build_hateoas_grapes_router(grape_service, hub_service))
    app.include_router(router=build_grapes_router(grape_service, hub_service))
    app.include_router(router=build_hub_router(hub_service))

    # -------------------------------------------------------------------------
    # Root
    # -------------------------------------------------------------------------
    @app.get("/")
    def root():
        return {"message": "Welcome to the Grapes API. See /docs for OpenAPI UI."}

    return app


app = create_app()

# -----------------------------------------------------------------------------
# Entrypoint for `python main.py`
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
