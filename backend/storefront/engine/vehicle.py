"""
Vehicle rental selection.

Renting a vehicle needs identity documents before the vehicle counts toward
the price. The flow is modelled as a small state machine over immutable
``VehicleRental`` values:

    unselected --click--> pending_verification --confirm--> selected
    selected --click same--> unselected

Clicking a different vehicle always restarts verification for that vehicle.
"""
from __future__ import annotations

from typing import Optional

from storefront.models.domain import VehicleDocuments, VehicleRental, VehicleState


class VerificationError(ValueError):
    """Raised when a vehicle is confirmed without the required documents."""


class InvalidTransitionError(ValueError):
    """Raised when a transition is not allowed from the current state."""


MISSING_DOCUMENTS_MESSAGE = "Please upload both Driving License and identity card images."


def click(rental: VehicleRental, vehicle_id: str) -> VehicleRental:
    if rental.vehicle_id == vehicle_id and rental.state != VehicleState.unselected:
        return VehicleRental()
    return VehicleRental(state=VehicleState.pending_verification, vehicle_id=vehicle_id)


def cancel(rental: VehicleRental) -> VehicleRental:
    if rental.state == VehicleState.pending_verification:
        return VehicleRental()
    return rental


def missing_documents(documents: Optional[VehicleDocuments]) -> list[str]:
    if documents is None:
        return ["license_image", "identity_image"]
    missing = []
    if not documents.license_image:
        missing.append("license_image")
    if not documents.identity_image:
        missing.append("identity_image")
    return missing


def confirm(rental: VehicleRental, documents: Optional[VehicleDocuments]) -> VehicleRental:
    if rental.state != VehicleState.pending_verification:
        raise InvalidTransitionError(
            f"No vehicle is awaiting verification (state: {rental.state.value})"
        )
    if missing_documents(documents):
        raise VerificationError(MISSING_DOCUMENTS_MESSAGE)
    return VehicleRental(state=VehicleState.selected, vehicle_id=rental.vehicle_id)
