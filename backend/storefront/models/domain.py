from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple


class RoomType(str, Enum):
    ac = "AC"
    non_ac = "Non-AC"


class SortOrder(str, Enum):
    recommended = "Recommended"
    top_rated = "Top Rated"
    lowest_price = "Lowest Price"


class VehicleState(str, Enum):
    unselected = "unselected"
    pending_verification = "pending_verification"
    selected = "selected"


class BookingStatus(str, Enum):
    confirmed = "confirmed"


class PaymentStatus(str, Enum):
    authorized = "authorized"


@dataclass(frozen=True)
class Room:
    id: str
    name: str
    type: RoomType
    price: float
    capacity: int
    image: str = ""

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"Room {self.id} capacity must be at least 1")
        if self.price < 0:
            raise ValueError(f"Room {self.id} price must not be negative")


@dataclass(frozen=True)
class Vehicle:
    id: str
    name: str
    price: float
    seats: int
    image: str = ""

    def __post_init__(self) -> None:
        if self.seats < 1:
            raise ValueError(f"Vehicle {self.id} must have at least one seat")
        if self.price < 0:
            raise ValueError(f"Vehicle {self.id} price must not be negative")


@dataclass(frozen=True)
class Destination:
    id: int
    title: str
    location: str
    rating: float
    description: str
    price: float
    amenities: FrozenSet[str] = frozenset()
    rooms: Tuple[Room, ...] = ()
    vehicles: Tuple[Vehicle, ...] = ()
    has_banquet_hall: bool = False
    hall_capacity: Optional[int] = None
    image: str = ""

    def find_room(self, room_id: Optional[str]) -> Optional[Room]:
        return next((r for r in self.rooms if r.id == room_id), None)

    def find_vehicle(self, vehicle_id: Optional[str]) -> Optional[Vehicle]:
        return next((v for v in self.vehicles if v.id == vehicle_id), None)


@dataclass(frozen=True)
class SearchCriteria:
    query: str = ""
    guests: int = 1


@dataclass(frozen=True)
class FilterState:
    price_range: Tuple[float, float] = (0.0, 1000.0)
    selected_amenities: FrozenSet[str] = frozenset()
    sort: SortOrder = SortOrder.recommended

    def __post_init__(self) -> None:
        low, high = self.price_range
        if low > high:
            raise ValueError("price_range minimum must not exceed maximum")


@dataclass
class BookingSelection:
    destination_id: int
    selected_room_id: Optional[str] = None
    include_hall: bool = False
    selected_vehicle_id: Optional[str] = None
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    adults: int = 1
    children: int = 0

    @property
    def total_guests(self) -> int:
        return self.adults + self.children


@dataclass(frozen=True)
class LineItem:
    label: str
    amount: float


@dataclass(frozen=True)
class Quote:
    nights: int
    room_units_needed: int
    nightly_rate: float
    total_guests: int
    base_lodging_cost: float
    hall_fee: float
    vehicle_fee: float
    grand_total: float
    is_bookable: bool
    summary: str
    line_items: Tuple[LineItem, ...] = ()


@dataclass(frozen=True)
class VehicleDocuments:
    license_image: Optional[str] = None
    identity_image: Optional[str] = None
    license_number: Optional[str] = None


@dataclass(frozen=True)
class VehicleRental:
    state: VehicleState = VehicleState.unselected
    vehicle_id: Optional[str] = None

    @property
    def selected_vehicle_id(self) -> Optional[str]:
        """Vehicle id that counts for pricing, only once verification passed."""
        if self.state == VehicleState.selected:
            return self.vehicle_id
        return None


@dataclass
class BookingDraft:
    draft_id: str
    selection: BookingSelection
    rental: VehicleRental = field(default_factory=VehicleRental)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class BookingConfirmation:
    reference: str
    draft_id: str
    destination_id: int
    status: BookingStatus
    payment_status: PaymentStatus
    total: float
    created_at: datetime
    line_items: List[LineItem] = field(default_factory=list)
