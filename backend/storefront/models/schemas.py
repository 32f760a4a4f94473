from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from storefront.core.config import settings
from storefront.models.domain import (
    BookingConfirmation,
    BookingDraft,
    BookingStatus,
    Destination,
    FilterState,
    LineItem,
    PaymentStatus,
    Quote,
    Room,
    RoomType,
    SearchCriteria,
    SortOrder,
    Vehicle,
    VehicleDocuments,
    VehicleRental,
    VehicleState,
)


class RoomSchema(BaseModel):
    id: str
    name: str
    type: RoomType
    price: float
    capacity: int
    image: str

    @classmethod
    def from_domain(cls, obj: Room) -> "RoomSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            type=obj.type,
            price=obj.price,
            capacity=obj.capacity,
            image=obj.image,
        )


class VehicleSchema(BaseModel):
    id: str
    name: str
    price: float
    seats: int
    image: str

    @classmethod
    def from_domain(cls, obj: Vehicle) -> "VehicleSchema":
        return cls(id=obj.id, name=obj.name, price=obj.price, seats=obj.seats, image=obj.image)


class DestinationSummarySchema(BaseModel):
    id: int
    title: str
    location: str
    rating: float
    description: str
    price: float
    image: str
    amenities: List[str]
    has_banquet_hall: bool

    @classmethod
    def from_domain(cls, obj: Destination) -> "DestinationSummarySchema":
        return cls(
            id=obj.id,
            title=obj.title,
            location=obj.location,
            rating=obj.rating,
            description=obj.description,
            price=obj.price,
            image=obj.image,
            amenities=sorted(obj.amenities),
            has_banquet_hall=obj.has_banquet_hall,
        )


class DestinationDetailSchema(DestinationSummarySchema):
    hall_capacity: Optional[int] = None
    rooms: List[RoomSchema]
    vehicles: List[VehicleSchema]

    @classmethod
    def from_domain(cls, obj: Destination) -> "DestinationDetailSchema":
        summary = DestinationSummarySchema.from_domain(obj)
        return cls(
            **summary.model_dump(),
            hall_capacity=obj.hall_capacity,
            rooms=[RoomSchema.from_domain(r) for r in obj.rooms],
            vehicles=[VehicleSchema.from_domain(v) for v in obj.vehicles],
        )


class SearchRequest(BaseModel):
    query: str = ""
    guests: int = Field(1, ge=1)
    price_min: float = Field(0.0, ge=0)
    price_max: float = Field(default_factory=lambda: settings.price_range_max, ge=0)
    amenities: List[str] = Field(default_factory=list)
    sort: SortOrder = SortOrder.recommended

    @model_validator(mode="after")
    def check_bounds(self) -> "SearchRequest":
        if self.price_min > self.price_max:
            raise ValueError("price_min must not exceed price_max")
        if self.guests > settings.max_search_guests:
            raise ValueError(f"guests must not exceed {settings.max_search_guests}")
        return self

    def to_criteria(self) -> SearchCriteria:
        return SearchCriteria(query=self.query, guests=self.guests)

    def to_filter_state(self) -> FilterState:
        return FilterState(
            price_range=(self.price_min, self.price_max),
            selected_amenities=frozenset(self.amenities),
            sort=self.sort,
        )


class SearchResponse(BaseModel):
    query: str
    guests: int
    searched: bool
    count: int
    results: List[DestinationSummarySchema]


class LineItemSchema(BaseModel):
    label: str
    amount: float

    @classmethod
    def from_domain(cls, obj: LineItem) -> "LineItemSchema":
        return cls(label=obj.label, amount=obj.amount)


class QuoteSchema(BaseModel):
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
    line_items: List[LineItemSchema]

    @classmethod
    def from_domain(cls, obj: Quote) -> "QuoteSchema":
        return cls(
            nights=obj.nights,
            room_units_needed=obj.room_units_needed,
            nightly_rate=obj.nightly_rate,
            total_guests=obj.total_guests,
            base_lodging_cost=obj.base_lodging_cost,
            hall_fee=obj.hall_fee,
            vehicle_fee=obj.vehicle_fee,
            grand_total=obj.grand_total,
            is_bookable=obj.is_bookable,
            summary=obj.summary,
            line_items=[LineItemSchema.from_domain(i) for i in obj.line_items],
        )


class DraftCreateRequest(BaseModel):
    destination_id: int
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    adults: int = Field(1, ge=1)
    children: int = Field(0, ge=0)


class DraftUpdateRequest(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    check_in: Optional[date] = None
    check_out: Optional[date] = None
    adults: Optional[int] = Field(None, ge=1)
    children: Optional[int] = Field(None, ge=0)
    selected_room_id: Optional[str] = None
    include_hall: Optional[bool] = None


class VehicleVerificationRequest(BaseModel):
    license_image: Optional[str] = None
    identity_image: Optional[str] = None
    license_number: Optional[str] = None

    def to_documents(self) -> VehicleDocuments:
        return VehicleDocuments(
            license_image=self.license_image,
            identity_image=self.identity_image,
            license_number=self.license_number,
        )


class VehicleRentalSchema(BaseModel):
    state: VehicleState
    vehicle_id: Optional[str] = None
    vehicle_name: Optional[str] = None

    @classmethod
    def from_domain(
        cls, obj: VehicleRental, vehicle_name: Optional[str] = None
    ) -> "VehicleRentalSchema":
        return cls(state=obj.state, vehicle_id=obj.vehicle_id, vehicle_name=vehicle_name)


class DraftResponse(BaseModel):
    draft_id: str
    destination_id: int
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    adults: int
    children: int
    selected_room_id: Optional[str] = None
    include_hall: bool
    vehicle: VehicleRentalSchema
    quote: QuoteSchema
    created_at: datetime

    @classmethod
    def from_domain(
        cls, obj: BookingDraft, quote: Quote, vehicle_name: Optional[str] = None
    ) -> "DraftResponse":
        selection = obj.selection
        return cls(
            draft_id=obj.draft_id,
            destination_id=selection.destination_id,
            check_in=selection.check_in,
            check_out=selection.check_out,
            adults=selection.adults,
            children=selection.children,
            selected_room_id=selection.selected_room_id,
            include_hall=selection.include_hall,
            vehicle=VehicleRentalSchema.from_domain(obj.rental, vehicle_name),
            quote=QuoteSchema.from_domain(quote),
            created_at=obj.created_at,
        )


class BookingConfirmationSchema(BaseModel):
    reference: str
    draft_id: str
    destination_id: int
    status: BookingStatus
    payment_status: PaymentStatus
    total: float
    created_at: datetime
    line_items: List[LineItemSchema]

    @classmethod
    def from_domain(cls, obj: BookingConfirmation) -> "BookingConfirmationSchema":
        return cls(
            reference=obj.reference,
            draft_id=obj.draft_id,
            destination_id=obj.destination_id,
            status=obj.status,
            payment_status=obj.payment_status,
            total=obj.total,
            created_at=obj.created_at,
            line_items=[LineItemSchema.from_domain(i) for i in obj.line_items],
        )
