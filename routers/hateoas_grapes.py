import logging
from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from models.grape import GrapeCreate, GrapeRead
from models.hateoas import HATEOASEnvelope
from routers.grapes import create_grape, remove_grape
from services.results import GrapeNotifier, GrapeStore
from utils.hateoas import hateoas_grapes

logger = logging.getLogger(__name__)


def build_hateoas_grapes_router(grape_service: GrapeStore, hub_service: GrapeNotifier) -> APIRouter:
    """
    Grape endpoints whose read responses carry navigation links.
    Collaborators are bound here once; handlers close over them.
    """
    router = APIRouter(
        prefix="/api/v1/hateoas-grapes",
        tags=["HATEOAS Grapes"],
    )

    # -------------------------------------------------------------------------
    # POST Endpoints
    # -------------------------------------------------------------------------

    @router.post(
        "/",
        status_code=201,
        name="add_hateoas_grape",
        response_class=PlainTextResponse,
        responses={500: {"description": "Internal Server Error"}},
    )
    async def add_grape(grape: GrapeCreate):
        """Create a new grape"""
        return await create_grape(grape_service, hub_service, grape)

    # -------------------------------------------------------------------------
    # GET Endpoints
    # -------------------------------------------------------------------------

    @router.get(
        "/",
        response_model=HATEOASEnvelope[List[GrapeRead]],
        status_code=200,
        name="list_hateoas_grapes",
        responses={500: {"description": "Internal Server Error"}},
    )
    async def list_grapes(request: Request):
        """Get all the grapes"""
        result = await grape_service.get_grapes()

        if not result.ok:
            logger.error("Failed to retrieve grapes.", exc_info=result.error)
            return PlainTextResponse("Failed", status_code=500)

        logger.info("Grapes are fetched.")
        return hateoas_grapes(request, result.value)

    # -------------------------------------------------------------------------
    # DELETE Endpoints
    # -------------------------------------------------------------------------

    @router.delete(
        "/{grape_id}",
        status_code=200,
        name="delete_hateoas_grape",
        responses={500: {"description": "Internal Server Error"}},
    )
    async def delete_grape(grape_id: int):
        """Delete a grape"""
        return await remove_grape(grape_service, hub_service, grape_id)

    return router
