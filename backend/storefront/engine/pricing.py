from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from storefront.models.domain import Room, Vehicle

HALL_FEE = 500.0


@dataclass(frozen=True)
class Allocation:
    units_needed: int
    nightly_rate: float
    base_lodging_cost: float


@dataclass(frozen=True)
class AddOns:
    hall_fee: float
    vehicle_fee: float


def allocate(
    selected_room: Optional[Room],
    total_guests: int,
    nights: int,
    base_price: float,
) -> Allocation:
    """
    Work out how many units of the chosen room type the party needs.

    Guests beyond one unit's capacity spill into extra units of the same
    type. Without a room the destination base price is used for a single
    placeholder unit.
    """
    if selected_room is None:
        units = 1
        rate = base_price
    else:
        units = max(1, math.ceil(total_guests / selected_room.capacity))
        rate = selected_room.price
    return Allocation(
        units_needed=units,
        nightly_rate=rate,
        base_lodging_cost=rate * nights * units,
    )


def addons(
    include_hall: bool,
    selected_vehicle: Optional[Vehicle],
    nights: int,
    hall_fee: float = HALL_FEE,
) -> AddOns:
    # hall is a flat fee per booking; the vehicle is charged per day
    return AddOns(
        hall_fee=hall_fee if include_hall else 0.0,
        vehicle_fee=selected_vehicle.price * nights if selected_vehicle else 0.0,
    )
