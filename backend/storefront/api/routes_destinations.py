import asyncio
import logging
from typing import List, Set

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect

from storefront.api import get_catalog
from storefront.core.config import settings
from storefront.engine.debounce import Debouncer
from storefront.engine.search import AMENITY_OPTIONS
from storefront.models.schemas import (
    DestinationDetailSchema,
    DestinationSummarySchema,
    SearchRequest,
    SearchResponse,
)
from storefront.services.search_service import SearchService
from storefront.storage.catalog import CatalogStore

logger = logging.getLogger(__name__)

router = APIRouter()


def get_search_service(catalog: CatalogStore = Depends(get_catalog)) -> SearchService:
    return SearchService(catalog=catalog)


@router.get("", response_model=List[DestinationSummarySchema])
def list_destinations(
    service: SearchService = Depends(get_search_service),
) -> List[DestinationSummarySchema]:
    return service.list_destinations()


@router.get("/amenities", response_model=List[str])
def list_amenities() -> List[str]:
    return list(AMENITY_OPTIONS)


@router.get("/suggestions", response_model=List[DestinationSummarySchema])
def suggestions(
    q: str = Query(""),
    service: SearchService = Depends(get_search_service),
) -> List[DestinationSummarySchema]:
    return service.suggestions(q)


@router.post("/search", response_model=SearchResponse)
def search_destinations(
    request: SearchRequest,
    service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    return service.search(request)


@router.get("/{destination_id}", response_model=DestinationDetailSchema)
def get_destination(
    destination_id: int,
    service: SearchService = Depends(get_search_service),
) -> DestinationDetailSchema:
    return service.get_destination(destination_id)


@router.websocket("/suggestions/ws")
async def suggestions_stream(
    websocket: WebSocket,
    catalog: CatalogStore = Depends(get_catalog),
) -> None:
    """Debounced autocomplete: only the last query typed within the quiet period is answered."""
    await websocket.accept()
    service = SearchService(catalog=catalog)
    sending: Set[asyncio.Task] = set()

    def deliver(query: str) -> None:
        payload = {
            "query": query,
            "results": [s.model_dump() for s in service.suggestions(query)],
        }
        task = asyncio.get_running_loop().create_task(websocket.send_json(payload))
        sending.add(task)
        task.add_done_callback(sending.discard)

    debouncer = Debouncer(settings.suggestion_debounce_ms / 1000, deliver)
    try:
        while True:
            debouncer.submit(await websocket.receive_text())
    except WebSocketDisconnect:
        debouncer.cancel()
        logger.debug("Suggestion stream closed")
