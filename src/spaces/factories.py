import random
from decimal import Decimal
from datetime import timedelta

import factory
from django.contrib.auth import get_user_model
from django.utils import timezone
from factory import Faker, LazyFunction, LazyAttribute, post_generation
from factory.django import DjangoModelFactory

from .models import State, City, AdvertisingSpace, Booking
from .services import quote_price
from .services.booking import generate_booking_code

# Major metros: (city, state, (lat_min, lat_max, lon_min, lon_max))
METROS = {
    "mumbai": ("Mumbai", "Maharashtra", (18.89, 19.27, 72.77, 72.98)),
    "delhi": ("New Delhi", "Delhi", (28.40, 28.88, 76.84, 77.35)),
    "bengaluru": ("Bengaluru", "Karnataka", (12.83, 13.14, 77.46, 77.78)),
    "chennai": ("Chennai", "Tamil Nadu", (12.90, 13.23, 80.13, 80.32)),
    "hyderabad": ("Hyderabad", "Telangana", (17.30, 17.55, 78.30, 78.62)),
    "kolkata": ("Kolkata", "West Bengal", (22.45, 22.65, 88.28, 88.45)),
    "pune": ("Pune", "Maharashtra", (18.43, 18.62, 73.74, 73.98)),
    "ahmedabad": ("Ahmedabad", "Gujarat", (22.95, 23.11, 72.48, 72.68)),
    "jaipur": ("Jaipur", "Rajasthan", (26.80, 27.00, 75.70, 75.90)),
    "lucknow": ("Lucknow", "Uttar Pradesh", (26.75, 26.95, 80.85, 81.05)),
}

def rand_metro() -> str:
    return random.choice(list(METROS.keys()))

def rand_point_in_metro(metro_key: str):
    lat_min, lat_max, lon_min, lon_max = METROS[metro_key][2]
    lat = Decimal(str(round(random.uniform(lat_min, lat_max), 6)))
    lon = Decimal(str(round(random.uniform(lon_min, lon_max), 6)))
    return lat, lon

MEDIA_TYPES = tuple(v for v, _ in AdvertisingSpace.MediaType.choices)

# (width, height) in feet per media type
SIZES = {
    "Billboard": [(40, 20), (30, 15), (20, 10)],
    "Digital Display": [(20, 10), (12, 8)],
    "Transit": [(10, 4), (6, 4)],
    "Street Furniture": [(6, 4), (4, 6)],
    "Mall Display": [(8, 6), (10, 8)],
}
# monthly INR price range per media type
PRICE_RANGES = {
    "Billboard": (60000, 300000),
    "Digital Display": (80000, 400000),
    "Transit": (15000, 60000),
    "Street Furniture": (10000, 45000),
    "Mall Display": (25000, 120000),
}
NAME_POOL = ["Junction", "Flyover", "Metro Station", "Ring Road", "Market", "Highway", "Mall Atrium"]
FEATURE_POOL = ["24x7 visibility", "Traffic signal", "Facing highway", "Near metro", "Premium location"]

# ---------------------------------------------------------------------------

class UserFactory(DjangoModelFactory):
    """
    Space manager. CustomUser has no 'username' field, so we only set email & names.
    Password is hashed in @post_generation.
    """
    class Meta:
        model = get_user_model()
        django_get_or_create = ("email",)

    email = factory.Sequence(lambda n: f"manager{n}@example.com")
    first_name = Faker("first_name", locale="en_IN")
    last_name = Faker("last_name", locale="en_IN")
    company_name = Faker("company", locale="en_IN")

    @post_generation
    def password(self, create, extracted, **kwargs):
        pwd = extracted or "Passw0rd!"
        self.set_password(pwd)
        if create:
            self.save()

# ---------------------------------------------------------------------------

class StateFactory(DjangoModelFactory):
    class Meta:
        model = State
        django_get_or_create = ("name",)

    name = factory.Sequence(lambda n: f"State {n}")


class CityFactory(DjangoModelFactory):
    class Meta:
        model = City
        django_get_or_create = ("state", "name")

    state = factory.SubFactory(StateFactory)
    name = factory.Sequence(lambda n: f"City {n}")


def metro_city(metro_key: str) -> City:
    city_name, state_name, _ = METROS[metro_key]
    return CityFactory(name=city_name, state=StateFactory(name=state_name))

# ---------------------------------------------------------------------------

class SpaceFactory(DjangoModelFactory):
    """Billboard-style listing pinned inside one metro's bounding box."""
    class Meta:
        model = AdvertisingSpace

    # service params used across fields (NOT passed to the model)
    class Params:
        metro = factory.LazyFunction(rand_metro)
        dimensions = factory.LazyAttribute(lambda o: random.choice(SIZES[o.media_type]))

    media_type = factory.LazyFunction(lambda: random.choice(MEDIA_TYPES))
    city = factory.LazyAttribute(lambda o: metro_city(o.metro))
    name = factory.LazyAttribute(
        lambda o: f"{METROS[o.metro][0]} {random.choice(NAME_POOL)} {o.media_type}"
    )
    address = Faker("street_address", locale="en_IN")

    latitude = factory.LazyAttribute(lambda o: rand_point_in_metro(o.metro)[0])
    longitude = factory.LazyAttribute(lambda o: rand_point_in_metro(o.metro)[1])
    width = factory.LazyAttribute(lambda o: Decimal(o.dimensions[0]))
    height = factory.LazyAttribute(lambda o: Decimal(o.dimensions[1]))

    illumination = factory.LazyAttribute(
        lambda o: AdvertisingSpace.Illumination.DIGITAL
        if o.media_type == AdvertisingSpace.MediaType.DIGITAL_DISPLAY
        else random.choice([AdvertisingSpace.Illumination.LIT, AdvertisingSpace.Illumination.NON_LIT])
    )
    visibility = factory.LazyFunction(lambda: random.choice(AdvertisingSpace.Visibility.values))
    traffic = factory.LazyFunction(lambda: f"{random.randint(20, 300)}K vehicles/day")
    monthly_price = factory.LazyAttribute(
        lambda o: Decimal(random.randrange(*PRICE_RANGES[o.media_type], 1000))
    )
    currency = "INR"
    is_available = True

    description = Faker("paragraph", nb_sentences=3)
    image_urls = factory.LazyAttribute(
        lambda o: [f"https://images.example.com/spaces/{o.metro}-{random.randint(1, 50)}.jpg"]
    )
    features = factory.LazyFunction(lambda: random.sample(FEATURE_POOL, 2))
    footfall = factory.LazyFunction(lambda: f"{random.randint(50, 500)}K daily")
    target_audience = "Commuters, office goers"
    managed_by = None

# ---------------------------------------------------------------------------

class BookingFactory(DjangoModelFactory):
    """Pending one-month booking; traits `confirmed` and `cancelled` switch status."""
    class Meta:
        model = Booking

    space = factory.SubFactory(SpaceFactory)

    start_date = LazyFunction(lambda: timezone.localdate() + timedelta(days=random.randint(5, 20)))
    end_date = LazyAttribute(lambda o: o.start_date + timedelta(days=30))

    client_name = Faker("name", locale="en_IN")
    client_email = Faker("email")
    client_phone = Faker("phone_number", locale="en_IN")
    company_name = Faker("company", locale="en_IN")

    booking_price = LazyAttribute(lambda o: quote_price(o.space.monthly_price, 1).total)
    period = Decimal("1")
    booker = factory.SelfAttribute("client_name")
    code = LazyFunction(generate_booking_code)
    status = Booking.PENDING

    class Params:
        confirmed = factory.Trait(status=Booking.CONFIRMED)
        cancelled = factory.Trait(status=Booking.CANCELLED)
