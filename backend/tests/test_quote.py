from datetime import date

import pytest

from storefront.engine.quote import build_quote
from storefront.models.domain import BookingSelection, Destination, Room, RoomType, Vehicle

DESTINATION = Destination(
    id=1,
    title="Thailand",
    location="Bangkok",
    rating=5.0,
    description="Beaches",
    price=120,
    amenities=frozenset({"Wifi", "Pool"}),
    rooms=(Room(id="deluxe", name="Deluxe Suite", type=RoomType.ac, price=220, capacity=4),),
    vehicles=(Vehicle(id="jeep", name="Jeep", price=60, seats=5),),
    has_banquet_hall=True,
    hall_capacity=100,
)


def _selection(**overrides) -> BookingSelection:
    values = dict(
        destination_id=1,
        selected_room_id="deluxe",
        check_in=date(2025, 5, 1),
        check_out=date(2025, 5, 4),
        adults=5,
        children=1,
    )
    values.update(overrides)
    return BookingSelection(**values)


def test_full_quote_with_hall():
    quote = build_quote(_selection(include_hall=True), DESTINATION)

    assert quote.nights == 3
    assert quote.total_guests == 6
    assert quote.room_units_needed == 2
    assert quote.base_lodging_cost == 1320
    assert quote.hall_fee == 500
    assert quote.vehicle_fee == 0
    assert quote.grand_total == 1820
    assert quote.is_bookable is True
    assert quote.summary == "Deluxe Suite (x2) + Hall"
    assert [i.label for i in quote.line_items] == [
        "$220 x 2 rooms x 3 nights",
        "Banquet Hall Fee",
    ]


@pytest.mark.parametrize(
    "include_hall, vehicle_id",
    [(False, None), (True, None), (False, "jeep"), (True, "jeep")],
)
def test_grand_total_is_sum_of_parts(include_hall, vehicle_id):
    quote = build_quote(
        _selection(include_hall=include_hall, selected_vehicle_id=vehicle_id), DESTINATION
    )
    assert quote.grand_total == quote.base_lodging_cost + quote.hall_fee + quote.vehicle_fee
    assert quote.vehicle_fee == (180 if vehicle_id else 0)


def test_vehicle_is_not_multiplied_by_room_units():
    quote = build_quote(_selection(selected_vehicle_id="jeep"), DESTINATION)
    assert quote.room_units_needed == 2
    assert quote.vehicle_fee == 60 * 3


def test_quote_without_room_is_priced_but_not_bookable():
    quote = build_quote(_selection(selected_room_id=None, include_hall=True), DESTINATION)

    assert quote.is_bookable is False
    assert quote.room_units_needed == 1
    assert quote.base_lodging_cost == 120 * 3
    assert quote.grand_total == 360 + 500
    assert quote.summary.startswith("Standard (x1)")


@pytest.mark.parametrize("include_hall", [False, True])
def test_bookable_depends_only_on_room(include_hall):
    with_room = build_quote(_selection(include_hall=include_hall, selected_vehicle_id="jeep"), DESTINATION)
    without_room = build_quote(
        _selection(selected_room_id=None, include_hall=include_hall, selected_vehicle_id="jeep"),
        DESTINATION,
    )
    assert with_room.is_bookable is True
    assert without_room.is_bookable is False


def test_missing_dates_price_a_single_night():
    quote = build_quote(_selection(check_in=None, check_out=None, adults=1, children=0), DESTINATION)
    assert quote.nights == 1
    assert quote.grand_total == 220


def test_hall_ignored_where_destination_has_none():
    no_hall = Destination(
        id=2, title="Bali", location="Indonesia", rating=4.7, description="", price=90,
        rooms=(Room(id="hut", name="Hut", type=RoomType.non_ac, price=90, capacity=2),),
    )
    quote = build_quote(
        BookingSelection(destination_id=2, selected_room_id="hut", include_hall=True), no_hall
    )
    assert quote.hall_fee == 0
    assert quote.grand_total == 90
