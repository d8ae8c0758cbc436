from __future__ import annotations

import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

# Import from the project package (settings use 'src.settings')
from src.spaces.models import AdvertisingSpace, Booking
from src.spaces.factories import METROS, UserFactory, SpaceFactory, BookingFactory


class Command(BaseCommand):
    """
    Seed the database with demo listings:
    - Space managers (password: Passw0rd!)
    - Spaces distributed across major Indian metros with map pins
    - A confirmed booking in the current month and a pending one later on
    """

    help = "Seed the DB with demo OOH spaces and bookings (Indian metros, pins, bookings)."

    def add_arguments(self, parser):
        parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
        parser.add_argument("--wipe", action="store_true", help="Delete ALL spaces and bookings before seeding.")
        parser.add_argument("--managers", type=int, default=3, help="How many space managers to create.")
        parser.add_argument("--spaces", type=int, default=60, help="How many spaces to create.")
        parser.add_argument("--without-bookings", action="store_true", help="Do not create demo bookings.")

    @transaction.atomic
    def handle(self, *args, **opts):
        seed = opts.get("seed")
        if seed is not None:
            random.seed(seed)

        if opts["wipe"]:
            self.stdout.write(self.style.WARNING("Wiping ALL spaces and bookings..."))
            Booking.objects.all().delete()
            AdvertisingSpace.objects.all().delete()

        managers_n = max(opts["managers"], 1)
        spaces_n = opts["spaces"]

        managers = [UserFactory(password="Passw0rd!") for _ in range(managers_n)]
        self.stdout.write(
            self.style.SUCCESS(f"Managers created: {managers_n} (password: Passw0rd!)")
        )

        metros = list(METROS.keys())
        spaces = [
            # Round-robin metros and managers
            SpaceFactory(metro=metros[i % len(metros)], managed_by=managers[i % managers_n])
            for i in range(spaces_n)
        ]

        if not opts["without_bookings"]:
            today = timezone.localdate()
            for space in spaces:
                current_start = today.replace(day=1)
                BookingFactory(
                    space=space,
                    start_date=current_start,
                    end_date=current_start + timedelta(days=27),
                    confirmed=True,
                )
                later_start = today + timedelta(days=random.randint(45, 90))
                BookingFactory(space=space, start_date=later_start, end_date=later_start + timedelta(days=30))

        self.stdout.write(self.style.SUCCESS(f"Seeding done: spaces={len(spaces)}"))
