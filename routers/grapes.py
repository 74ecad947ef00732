import logging
from typing import List

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from models.grape import GrapeCreate, GrapeRead
from services.results import GrapeNotifier, GrapeStore

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Shared handler bodies
# -----------------------------------------------------------------------------
async def create_grape(
    store: GrapeStore,
    notifier: GrapeNotifier,
    grape: GrapeCreate,
) -> Response:
    """Store a grape, then tell hub clients about it."""
    result = await store.add_grape(grape)
    if result.ok:
        result = await notifier.send_grape_message()

    if not result.ok:
        logger.error("Failed to create grape.", exc_info=result.error)
        return PlainTextResponse("Server error", status_code=500)

    return PlainTextResponse("Grape created", status_code=201)


async def remove_grape(
    store: GrapeStore,
    notifier: GrapeNotifier,
    grape_id: int,
) -> Response:
    """Delete a grape by id, then tell hub clients about it."""
    result = await store.delete_grape(grape_id)
    if result.ok:
        result = await notifier.send_grape_message()

    if not result.ok:
        logger.error("Failed to delete grape.", exc_info=result.error)
        return PlainTextResponse("Failed", status_code=500)

    logger.info(f"Grape with id:{grape_id} is deleted.")
    return Response(status_code=200)


# -----------------------------------------------------------------------------
# Router
# -----------------------------------------------------------------------------
def build_grapes_router(grape_service: GrapeStore, hub_service: GrapeNotifier) -> APIRouter:
    router = APIRouter(
        prefix="/api/v1/grapes",
        tags=["Grapes"],
    )

    # POST new Grape
    @router.post("/", status_code=201, name="add_grape", response_class=PlainTextResponse)
    async def add_grape(grape: GrapeCreate):
        return await create_grape(grape_service, hub_service, grape)

    # GET Grapes (list)
    @router.get("/", response_model=List[GrapeRead], status_code=200, name="list_grapes")
    async def list_grapes():
        result = await grape_service.get_grapes()

        if not result.ok:
            logger.error("Failed to retrieve grapes.", exc_info=result.error)
            return PlainTextResponse("Failed", status_code=500)

        logger.info("Grapes are fetched.")
        return result.value

    # DELETE Grape specific
    @router.delete("/{grape_id}", status_code=200, name="delete_grape")
    async def delete_grape(grape_id: int):
        return await remove_grape(grape_service, hub_service, grape_id)

    return router
