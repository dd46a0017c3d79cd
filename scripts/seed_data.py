"""Seed a Supabase project with sample Ugandan student hostels.

Creates a demo hostel owner and a demo student, lists five hostels near
Makerere, Kyambogo, Mbarara, Gulu and Busitema universities with their
rooms, and places a few pending bookings for the owner dashboard.

Reads SUPABASE_URL and SUPABASE_ANON_KEY from the environment or ``.env``.
The project must not require e-mail confirmation, since the script signs
in as the accounts it creates.

    python -m scripts.seed_data
"""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

from hostelhub.auth import client as auth_client
from hostelhub.config import get_settings
from hostelhub.database import create_supabase_client
from hostelhub.errors import AuthenticationError
from hostelhub.main import configure_logging
from hostelhub.schemas import BookingCreate, HotelCreate, RegistrationData, RoomCreate
from hostelhub.services import booking_service, hotel_service, room_service

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

DEMO_OWNER = {
    "name": "Demo Hostel Owner",
    "email": "owner@hostelhub.ug",
    "phone": "+256772000111",
    "role": "owner",
}
DEMO_STUDENT = {
    "name": "John Doe",
    "email": "student@hostelhub.ug",
    "phone": "+256701234567",
    "university": "Makerere University",
    "role": "user",
}
DEMO_PASSWORD = "hostelhub123"

# Prices are per semester in UGX
HOSTELS = [
    {
        "name": "Olympia Hostel",
        "description": (
            "Modern accommodation with excellent facilities for students. "
            "Located just 5 minutes from campus."
        ),
        "address": "23 University Road, Kampala",
        "contact_number": "+256772000111",
        "amenities": ["WiFi", "Security", "Study Room", "Laundry", "Power Backup"],
        "rooms": [
            ("A1", "Single", "450000", ["Bed", "Desk", "Wardrobe", "Private Bathroom"]),
            ("A2", "Double", "350000", ["Beds", "Desks", "Wardrobe", "Shared Bathroom"]),
        ],
    },
    {
        "name": "Livingstone Hostel",
        "description": "Affordable and comfortable accommodation for students with all essential amenities.",
        "address": "15 Kyambogo Road, Kampala",
        "contact_number": "+256772000222",
        "amenities": ["WiFi", "Security", "Cafeteria", "Laundry"],
        "rooms": [
            ("L1", "Single", "400000", ["Bed", "Desk", "Wardrobe", "Shared Bathroom"]),
            ("L2", "Triple", "300000", ["Beds", "Desks", "Wardrobe", "Shared Bathroom"]),
        ],
    },
    {
        "name": "Sunset Residences",
        "description": "Premium hostel with modern facilities and a great view of the city.",
        "address": "55 Mbarara Hill, Mbarara",
        "contact_number": "+256772000333",
        "amenities": ["WiFi", "Security", "Gym", "Swimming Pool", "Study Room", "Laundry", "Power Backup"],
        "rooms": [
            ("S1", "Single Deluxe", "550000", ["Bed", "Desk", "Wardrobe", "Private Bathroom", "AC", "TV"]),
            ("S2", "Double", "450000", ["Beds", "Desks", "Wardrobe", "Shared Bathroom", "AC"]),
        ],
    },
    {
        "name": "Northern Star Hostel",
        "description": "Comfortable and safe accommodation for Gulu University students.",
        "address": "12 Gulu Avenue, Gulu",
        "contact_number": "+256772000444",
        "amenities": ["WiFi", "Security", "Cafeteria", "Power Backup"],
        "rooms": [
            ("N1", "Single", "380000", ["Bed", "Desk", "Wardrobe", "Shared Bathroom"]),
            ("N2", "Double", "320000", ["Beds", "Desks", "Wardrobe", "Shared Bathroom"]),
        ],
    },
    {
        "name": "Eastern Comfort",
        "description": "Peaceful and well-maintained hostel for Busitema University students.",
        "address": "32 Tororo Road, Tororo",
        "contact_number": "+256772000555",
        "amenities": ["WiFi", "Security", "Study Room", "Laundry", "Garden"],
        "rooms": [
            ("E1", "Single", "400000", ["Bed", "Desk", "Wardrobe", "Shared Bathroom"]),
            ("E2", "Double", "350000", ["Beds", "Desks", "Wardrobe", "Shared Bathroom"]),
        ],
    },
]

# (hostel name, room number) the demo student has asked for
BOOKED_ROOMS = [
    ("Olympia Hostel", "A1"),
    ("Livingstone Hostel", "L2"),
    ("Sunset Residences", "S2"),
]

SEMESTER_MONTHS = 4


async def _ensure_account(client, registration: RegistrationData) -> str:
    """Register ``registration`` or, if it already exists, sign in. Returns the user id."""
    try:
        user = await auth_client.sign_up(client, registration, DEMO_PASSWORD)
    except AuthenticationError as exc:
        if exc.code != "user_already_exists":
            raise
        user = None
    if user is None:
        user = await auth_client.sign_in(client, registration.email, DEMO_PASSWORD)
    return user.id


# ---------------------------------------------------------------------------
# Main seed function
# ---------------------------------------------------------------------------


async def seed() -> None:
    """Populate the project with demo accounts, hostels, rooms and bookings.

    Safe to re-run: if the demo owner already lists hostels nothing is added.
    """
    settings = get_settings()
    configure_logging(settings)
    client = await create_supabase_client(settings)

    student_id = await _ensure_account(client, RegistrationData(**DEMO_STUDENT))
    await auth_client.sign_out(client)
    owner_id = await _ensure_account(client, RegistrationData(**DEMO_OWNER))
    print(f"✅ Demo owner {DEMO_OWNER['email']} (id={owner_id})")
    print(f"✅ Demo student {DEMO_STUDENT['email']} (id={student_id})")

    existing = await hotel_service.get_by_owner(client, owner_id)
    if existing:
        print(f"⚠️  Demo owner already lists {len(existing)} hostels, nothing to seed.")
        return

    # ------------------------------------------------------------------
    # 1. Hostels and rooms (as the owner)
    # ------------------------------------------------------------------
    rooms_by_key = {}
    for hostel_data in HOSTELS:
        hotel = await hotel_service.create(
            client,
            HotelCreate(
                owner_id=owner_id,
                name=hostel_data["name"],
                description=hostel_data["description"],
                address=hostel_data["address"],
                contact_number=hostel_data["contact_number"],
                amenities=hostel_data["amenities"],
            ),
        )
        for room_number, room_type, price, amenities in hostel_data["rooms"]:
            room = await room_service.create(
                client,
                RoomCreate(
                    hotel_id=hotel.id,
                    room_number=room_number,
                    type=room_type,
                    price=Decimal(price),
                    floor_number=1,
                    amenities=amenities,
                ),
            )
            rooms_by_key[(hotel.name, room_number)] = room
        print(f"   🏠 {hotel.name}, {hotel.address} ({len(hostel_data['rooms'])} rooms)")

    # ------------------------------------------------------------------
    # 2. Pending bookings (as the student)
    # ------------------------------------------------------------------
    await auth_client.sign_out(client)
    await auth_client.sign_in(client, DEMO_STUDENT["email"], DEMO_PASSWORD)

    check_in = date.today() + timedelta(days=14)
    check_out = check_in + timedelta(days=30 * SEMESTER_MONTHS)
    for key in BOOKED_ROOMS:
        room = rooms_by_key[key]
        await booking_service.create(
            client,
            BookingCreate(
                room_id=room.id,
                user_id=student_id,
                check_in_date=check_in,
                check_out_date=check_out,
                total_price=room.price,
            ),
        )
    await auth_client.sign_out(client)

    print()
    print("=" * 60)
    print("📊 Seed Summary")
    print("=" * 60)
    print(f"   Owner:    {DEMO_OWNER['email']} / {DEMO_PASSWORD}")
    print(f"   Student:  {DEMO_STUDENT['email']} / {DEMO_PASSWORD}")
    print(f"   Hostels:  {len(HOSTELS)}")
    print(f"   Rooms:    {len(rooms_by_key)}")
    print(f"   Bookings: {len(BOOKED_ROOMS)} (pending)")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(seed())
