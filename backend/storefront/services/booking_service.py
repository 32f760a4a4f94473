import dataclasses
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import HTTPException

from storefront.core.config import settings
from storefront.engine import vehicle as vehicle_flow
from storefront.engine.quote import build_quote
from storefront.models.domain import (
    BookingConfirmation,
    BookingDraft,
    BookingSelection,
    BookingStatus,
    Destination,
    PaymentStatus,
    Quote,
    VehicleDocuments,
)
from storefront.models.schemas import (
    BookingConfirmationSchema,
    DraftCreateRequest,
    DraftResponse,
    DraftUpdateRequest,
)
from storefront.storage.catalog import CatalogStore
from storefront.storage.repository import InMemoryDraftRepository

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, catalog: CatalogStore, repository: InMemoryDraftRepository):
        self.catalog = catalog
        self.repository = repository

    def _destination(self, destination_id: int) -> Destination:
        destination = self.catalog.get_by_id(destination_id)
        if not destination:
            raise HTTPException(status_code=404, detail="Destination not found")
        return destination

    def _draft(self, draft_id: str) -> BookingDraft:
        draft = self.repository.get_draft(draft_id)
        if not draft:
            raise HTTPException(status_code=404, detail="Draft not found")
        return draft

    def _quote(self, draft: BookingDraft) -> Quote:
        destination = self._destination(draft.selection.destination_id)
        return build_quote(draft.selection, destination, hall_fee=settings.hall_fee)

    def _respond(self, draft: BookingDraft) -> DraftResponse:
        destination = self._destination(draft.selection.destination_id)
        vehicle = destination.find_vehicle(draft.rental.vehicle_id)
        return DraftResponse.from_domain(
            draft, self._quote(draft), vehicle_name=vehicle.name if vehicle else None
        )

    def create_draft(self, request: DraftCreateRequest) -> DraftResponse:
        self._destination(request.destination_id)
        selection = BookingSelection(
            destination_id=request.destination_id,
            check_in=request.check_in,
            check_out=request.check_out,
            adults=request.adults,
            children=request.children,
        )
        draft = self.repository.save_draft(BookingDraft(draft_id=str(uuid4()), selection=selection))
        logger.info("Created draft %s for destination %s", draft.draft_id, request.destination_id)
        return self._respond(draft)

    def get_draft(self, draft_id: str) -> DraftResponse:
        return self._respond(self._draft(draft_id))

    def update_draft(self, draft_id: str, request: DraftUpdateRequest) -> DraftResponse:
        draft = self._draft(draft_id)
        destination = self._destination(draft.selection.destination_id)
        changes = request.model_dump(exclude_unset=True)
        # null clears dates and the room; counters and the hall toggle keep their value
        for name in ("adults", "children", "include_hall"):
            if name in changes and changes[name] is None:
                del changes[name]
        room_id = changes.get("selected_room_id")
        if room_id is not None and destination.find_room(room_id) is None:
            raise HTTPException(status_code=404, detail="Room not found")
        if changes.get("include_hall") and not destination.has_banquet_hall:
            raise HTTPException(status_code=409, detail="Destination has no banquet hall")
        draft.selection = dataclasses.replace(draft.selection, **changes)
        self.repository.save_draft(draft)
        return self._respond(draft)

    def click_vehicle(self, draft_id: str, vehicle_id: str) -> DraftResponse:
        draft = self._draft(draft_id)
        destination = self._destination(draft.selection.destination_id)
        if destination.find_vehicle(vehicle_id) is None:
            raise HTTPException(status_code=404, detail="Vehicle not found")
        self._set_rental(draft, vehicle_flow.click(draft.rental, vehicle_id))
        return self._respond(draft)

    def cancel_vehicle(self, draft_id: str) -> DraftResponse:
        draft = self._draft(draft_id)
        self._set_rental(draft, vehicle_flow.cancel(draft.rental))
        return self._respond(draft)

    def verify_vehicle(self, draft_id: str, documents: VehicleDocuments) -> DraftResponse:
        draft = self._draft(draft_id)
        try:
            rental = vehicle_flow.confirm(draft.rental, documents)
        except vehicle_flow.VerificationError as exc:
            logger.warning(
                "Vehicle verification rejected for draft %s: missing %s",
                draft_id,
                ", ".join(vehicle_flow.missing_documents(documents)),
            )
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except vehicle_flow.InvalidTransitionError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        logger.info("Vehicle %s verified for draft %s", rental.vehicle_id, draft_id)
        self._set_rental(draft, rental)
        return self._respond(draft)

    def checkout(self, draft_id: str) -> BookingConfirmationSchema:
        draft = self._draft(draft_id)
        quote = self._quote(draft)
        if not quote.is_bookable:
            logger.warning("Checkout rejected for draft %s: no room selected", draft_id)
            raise HTTPException(status_code=409, detail="Select a room before checking out")
        confirmation = BookingConfirmation(
            reference=str(uuid4()),
            draft_id=draft.draft_id,
            destination_id=draft.selection.destination_id,
            status=BookingStatus.confirmed,
            payment_status=PaymentStatus.authorized,
            total=quote.grand_total,
            created_at=datetime.now(timezone.utc),
            line_items=list(quote.line_items),
        )
        logger.info(
            "Checkout confirmed for draft %s: %s total %.2f",
            draft_id,
            quote.summary,
            quote.grand_total,
        )
        return BookingConfirmationSchema.from_domain(confirmation)

    def _set_rental(self, draft: BookingDraft, rental) -> None:
        draft.rental = rental
        draft.selection = dataclasses.replace(
            draft.selection, selected_vehicle_id=rental.selected_vehicle_id
        )
        self.repository.save_draft(draft)
