"""Date-range availability of a single advertising space."""
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional

from django.db import DatabaseError

from ..models import Booking

logger = logging.getLogger(__name__)

SEARCH_HORIZON_DAYS = 365


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    conflicting_bookings: List[Booking] = field(default_factory=list)
    next_available_date: Optional[date] = None
    suggested_end_date: Optional[date] = None
    # True when bookings could not be loaded and the result defaulted to available
    lookup_failed: bool = False

    @classmethod
    def fail_open(cls):
        return cls(available=True, lookup_failed=True)


def overlaps(start: date, end: date, booking) -> bool:
    """Closed-interval overlap; a shared boundary day counts as a conflict."""
    return start <= booking.end_date and end >= booking.start_date


def active_bookings(space_id) -> List[Booking]:
    """Pending and confirmed bookings of a space, earliest start first."""
    return list(
        Booking.objects.filter(
            space_id=space_id,
            status__in=Booking.ACTIVE_STATUSES,
        ).order_by('start_date')
    )


def find_next_available(bookings, conflicts, duration: timedelta,
                        horizon: int = SEARCH_HORIZON_DAYS):
    """
    Scan day by day from the day after the earliest conflicting end date for
    a window of ``duration`` that overlaps none of ``bookings``.

    Returns ``(start, end)`` or ``(None, None)`` when nothing is free within
    ``horizon`` candidate days.
    """
    if not conflicts:
        return None, None

    candidate = min(b.end_date for b in conflicts) + timedelta(days=1)
    for _ in range(horizon):
        candidate_end = candidate + duration
        if not any(overlaps(candidate, candidate_end, b) for b in bookings):
            return candidate, candidate_end
        candidate += timedelta(days=1)
    return None, None


def check_availability(space_id, start: date, end: date) -> AvailabilityResult:
    """
    Check ``[start, end]`` against the space's pending/confirmed bookings.

    Callers must pass ``start <= end``. A failed lookup is logged and reported
    as available so the booking wizard is never blocked by the read path.
    """
    try:
        bookings = active_bookings(space_id)
    except DatabaseError:
        logger.exception("Availability lookup failed for space %s; reporting available", space_id)
        return AvailabilityResult.fail_open()

    conflicts = [b for b in bookings if overlaps(start, end, b)]
    if not conflicts:
        return AvailabilityResult(available=True)

    next_start, next_end = find_next_available(bookings, conflicts, end - start)
    if next_start is None:
        logger.info(
            "No free %s-day window within %s days for space %s",
            (end - start).days, SEARCH_HORIZON_DAYS, space_id,
        )

    return AvailabilityResult(
        available=False,
        conflicting_bookings=conflicts,
        next_available_date=next_start,
        suggested_end_date=next_end,
    )
