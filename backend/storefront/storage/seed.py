from storefront.models.domain import Destination, Room, RoomType, Vehicle

_UNSPLASH = "https://images.unsplash.com/{}?q=80&w=2600&auto=format&fit=crop"

DESTINATIONS = (
    Destination(
        id=1,
        title="Thailand",
        location="Bangkok",
        rating=5.0,
        description="Explore Thailand's lively cities and stunning tropical beaches.",
        image=_UNSPLASH.format("photo-1552465011-b4e21bf6e79a"),
        price=120,
        amenities=frozenset({"Wifi", "Pool", "Air conditioning"}),
        rooms=(
            Room(id="th-std", name="Garden Room", type=RoomType.non_ac, price=120, capacity=2),
            Room(id="th-deluxe", name="Deluxe Suite", type=RoomType.ac, price=220, capacity=4),
        ),
        vehicles=(
            Vehicle(id="th-scooter", name="Honda Click Scooter", price=15, seats=2),
            Vehicle(id="th-suv", name="Toyota Fortuner", price=70, seats=7),
        ),
        has_banquet_hall=True,
        hall_capacity=150,
    ),
    Destination(
        id=2,
        title="Europe",
        location="Paris, France",
        rating=4.8,
        description="Experience Europe's rich history and diverse cultures.",
        image=_UNSPLASH.format("photo-1471623432079-916ef5b5e9f6"),
        price=250,
        amenities=frozenset({"Wifi", "Kitchen", "Heating"}),
        rooms=(
            Room(id="eu-classic", name="Classic Double", type=RoomType.non_ac, price=250, capacity=2),
            Room(id="eu-family", name="Family Loft", type=RoomType.ac, price=390, capacity=5),
        ),
        vehicles=(Vehicle(id="eu-compact", name="Peugeot 208", price=55, seats=5),),
    ),
    Destination(
        id=3,
        title="New York City",
        location="Manhattan, NY",
        rating=4.9,
        description="Dive into the energy of New York City, the city that never sleeps.",
        image=_UNSPLASH.format("photo-1496442226666-8d4a0e29f16e"),
        price=300,
        amenities=frozenset({"Wifi", "Gym", "Workplace"}),
        rooms=(
            Room(id="ny-king", name="King Room", type=RoomType.ac, price=300, capacity=2),
            Room(id="ny-suite", name="Skyline Suite", type=RoomType.ac, price=520, capacity=4),
        ),
        has_banquet_hall=True,
        hall_capacity=200,
    ),
    Destination(
        id=4,
        title="Dubai",
        location="Downtown Dubai",
        rating=5.0,
        description="Discover Dubai's stunning modern skyline and luxury shopping.",
        image=_UNSPLASH.format("photo-1512453979798-5ea936a7fe48"),
        price=450,
        amenities=frozenset({"Wifi", "Pool", "Gym", "Air conditioning"}),
        rooms=(
            Room(id="db-premier", name="Premier Room", type=RoomType.ac, price=450, capacity=3),
            Room(id="db-royal", name="Royal Suite", type=RoomType.ac, price=900, capacity=6),
        ),
        vehicles=(
            Vehicle(id="db-sedan", name="Lexus ES", price=110, seats=5),
            Vehicle(id="db-4x4", name="Land Cruiser", price=160, seats=7),
        ),
        has_banquet_hall=True,
        hall_capacity=300,
    ),
    Destination(
        id=5,
        title="Bali",
        location="Indonesia",
        rating=4.7,
        description="Find peace in the temples and rice terraces of Bali.",
        image=_UNSPLASH.format("photo-1537996194471-e657df975ab4"),
        price=90,
        amenities=frozenset({"Wifi", "Pool", "Kitchen"}),
        rooms=(
            Room(id="bl-hut", name="Bamboo Hut", type=RoomType.non_ac, price=90, capacity=2),
            Room(id="bl-villa", name="Pool Villa", type=RoomType.ac, price=260, capacity=4),
        ),
        vehicles=(Vehicle(id="bl-scooter", name="Vespa Primavera", price=12, seats=2),),
    ),
)
