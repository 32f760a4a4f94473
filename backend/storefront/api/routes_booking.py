from fastapi import APIRouter, Depends

from storefront.api import get_catalog, get_repository
from storefront.models.schemas import (
    BookingConfirmationSchema,
    DraftCreateRequest,
    DraftResponse,
    DraftUpdateRequest,
    VehicleVerificationRequest,
)
from storefront.services.booking_service import BookingService
from storefront.storage.catalog import CatalogStore
from storefront.storage.repository import InMemoryDraftRepository

router = APIRouter()


def get_booking_service(
    catalog: CatalogStore = Depends(get_catalog),
    repository: InMemoryDraftRepository = Depends(get_repository),
) -> BookingService:
    return BookingService(catalog=catalog, repository=repository)


@router.post("/drafts", response_model=DraftResponse, status_code=201)
def create_draft(
    request: DraftCreateRequest,
    service: BookingService = Depends(get_booking_service),
) -> DraftResponse:
    return service.create_draft(request)


@router.get("/drafts/{draft_id}", response_model=DraftResponse)
def get_draft(
    draft_id: str,
    service: BookingService = Depends(get_booking_service),
) -> DraftResponse:
    return service.get_draft(draft_id)


@router.patch("/drafts/{draft_id}", response_model=DraftResponse)
def update_draft(
    draft_id: str,
    request: DraftUpdateRequest,
    service: BookingService = Depends(get_booking_service),
) -> DraftResponse:
    return service.update_draft(draft_id, request)


@router.post("/drafts/{draft_id}/vehicle/verify", response_model=DraftResponse)
def verify_vehicle(
    draft_id: str,
    request: VehicleVerificationRequest,
    service: BookingService = Depends(get_booking_service),
) -> DraftResponse:
    return service.verify_vehicle(draft_id, request.to_documents())


@router.post("/drafts/{draft_id}/vehicle/{vehicle_id}", response_model=DraftResponse)
def click_vehicle(
    draft_id: str,
    vehicle_id: str,
    service: BookingService = Depends(get_booking_service),
) -> DraftResponse:
    return service.click_vehicle(draft_id, vehicle_id)


@router.delete("/drafts/{draft_id}/vehicle", response_model=DraftResponse)
def cancel_vehicle(
    draft_id: str,
    service: BookingService = Depends(get_booking_service),
) -> DraftResponse:
    return service.cancel_vehicle(draft_id)


@router.post("/drafts/{draft_id}/checkout", response_model=BookingConfirmationSchema)
def checkout(
    draft_id: str,
    service: BookingService = Depends(get_booking_service),
) -> BookingConfirmationSchema:
    return service.checkout(draft_id)
