import logging
from typing import List

from fastapi import HTTPException

from storefront.core.config import settings
from storefront.engine.search import filter_and_sort, search, suggest
from storefront.models.domain import Destination
from storefront.models.schemas import (
    DestinationDetailSchema,
    DestinationSummarySchema,
    SearchRequest,
    SearchResponse,
)
from storefront.storage.catalog import CatalogStore

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, catalog: CatalogStore):
        self.catalog = catalog

    def list_destinations(self) -> List[DestinationSummarySchema]:
        return [DestinationSummarySchema.from_domain(d) for d in self.catalog.all()]

    def get_destination(self, destination_id: int) -> DestinationDetailSchema:
        destination = self.catalog.get_by_id(destination_id)
        if not destination:
            raise HTTPException(status_code=404, detail="Destination not found")
        return DestinationDetailSchema.from_domain(destination)

    def search(self, request: SearchRequest) -> SearchResponse:
        # filters always re-derive from the unfiltered text matches
        matches: List[Destination] = search(self.catalog.all(), request.to_criteria())
        ranked = filter_and_sort(matches, request.to_filter_state())
        logger.info(
            "Search %r matched %d destinations, %d after filters",
            request.query,
            len(matches),
            len(ranked),
        )
        return SearchResponse(
            query=request.query,
            guests=request.guests,
            searched=True,
            count=len(ranked),
            results=[DestinationSummarySchema.from_domain(d) for d in ranked],
        )

    def suggestions(self, query: str) -> List[DestinationSummarySchema]:
        hits = suggest(self.catalog.all(), query, min_length=settings.suggestion_min_length)
        return [DestinationSummarySchema.from_domain(d) for d in hits]
