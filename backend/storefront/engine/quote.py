from __future__ import annotations

from typing import List

from storefront.engine.duration import nights as count_nights
from storefront.engine.pricing import HALL_FEE, addons, allocate
from storefront.models.domain import BookingSelection, Destination, LineItem, Quote


def build_quote(
    selection: BookingSelection,
    destination: Destination,
    hall_fee: float = HALL_FEE,
) -> Quote:
    """
    Price a booking selection against its destination.

    Always returns a complete quote. A selection without a room still gets a
    running total but is flagged as not bookable. Room or vehicle ids that do
    not exist at the destination are treated as not selected, and a hall is
    only charged where the destination has one.
    """
    stay = count_nights(selection.check_in, selection.check_out)
    room = destination.find_room(selection.selected_room_id)
    vehicle = destination.find_vehicle(selection.selected_vehicle_id)
    include_hall = selection.include_hall and destination.has_banquet_hall

    allocation = allocate(room, selection.total_guests, stay, destination.price)
    extras = addons(include_hall, vehicle, stay, hall_fee=hall_fee)
    grand_total = allocation.base_lodging_cost + extras.hall_fee + extras.vehicle_fee

    units = allocation.units_needed
    line_items: List[LineItem] = [
        LineItem(
            label=(
                f"${_money(allocation.nightly_rate)} x {units} room{'s' if units > 1 else ''}"
                f" x {stay} night{'s' if stay > 1 else ''}"
            ),
            amount=allocation.base_lodging_cost,
        )
    ]
    if extras.hall_fee:
        line_items.append(LineItem(label="Banquet Hall Fee", amount=extras.hall_fee))
    if vehicle and extras.vehicle_fee:
        line_items.append(
            LineItem(
                label=f"{vehicle.name} (${_money(vehicle.price)} x {stay} days)",
                amount=extras.vehicle_fee,
            )
        )

    summary = f"{room.name if room else 'Standard'} (x{units})"
    if extras.hall_fee:
        summary += " + Hall"
    if vehicle:
        summary += f" + {vehicle.name}"

    return Quote(
        nights=stay,
        room_units_needed=units,
        nightly_rate=allocation.nightly_rate,
        total_guests=selection.total_guests,
        base_lodging_cost=allocation.base_lodging_cost,
        hall_fee=extras.hall_fee,
        vehicle_fee=extras.vehicle_fee,
        grand_total=grand_total,
        is_bookable=room is not None,
        summary=summary,
        line_items=tuple(line_items),
    )


def _money(amount: float) -> str:
    return f"{amount:,.0f}" if float(amount).is_integer() else f"{amount:,.2f}"
