from django.contrib import admin, messages

from .models import State, City, AdvertisingSpace, Booking
from .services import BookingService


@admin.register(State)
class StateAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')
    search_fields = ('name',)


@admin.register(City)
class CityAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'state')
    list_filter = ('state',)
    search_fields = ('name', 'state__name')
    autocomplete_fields = ('state',)
    list_select_related = ('state',)


@admin.register(AdvertisingSpace)
class AdvertisingSpaceAdmin(admin.ModelAdmin):
    list_display = (
        'id', 'name', 'media_type', 'city', 'illumination',
        'monthly_price', 'is_available', 'managed_by', 'created_at'
    )
    list_filter = (
        'is_available',
        'media_type',
        'illumination',
        'visibility',
        'city__state',
        'created_at',  # date filter sidebar (Today / Past 7 days / etc.)
    )
    date_hierarchy = 'created_at'
    search_fields = ('id', 'name', 'slug', 'address', 'city__name', 'managed_by__email')
    autocomplete_fields = ('city', 'managed_by')
    readonly_fields = ('slug', 'created_at', 'updated_at')
    ordering = ('-created_at',)
    list_select_related = ('city', 'managed_by')


def _apply_status(modeladmin, request, qs, status):
    service = BookingService()
    changed = 0
    for booking in qs:
        result = service.update_status(booking.pk, status)
        if result.success:
            changed += 1
        else:
            modeladmin.message_user(request, f"{booking.reference}: {result.error}", messages.WARNING)
    if changed:
        modeladmin.message_user(request, f"{changed} booking(s) marked {status}.", messages.SUCCESS)


@admin.action(description="Confirm selected bookings")
def confirm_bookings(modeladmin, request, qs):
    _apply_status(modeladmin, request, qs, Booking.CONFIRMED)


@admin.action(description="Cancel selected bookings")
def cancel_bookings(modeladmin, request, qs):
    _apply_status(modeladmin, request, qs, Booking.CANCELLED)


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        'reference', 'code', 'space', 'client_name', 'client_email',
        'status', 'start_date', 'end_date', 'booking_price', 'created_at'
    )
    actions = (confirm_bookings, cancel_bookings)

    # Filter/search for moderation
    list_filter = (
        'status',
        'start_date',
        'end_date',
        'created_at',
    )
    date_hierarchy = 'created_at'
    search_fields = ('code', 'client_name', 'client_email', 'company_name', 'space__name')
    autocomplete_fields = ('space',)
    readonly_fields = ('code', 'booking_price', 'period', 'booker', 'status', 'created_at', 'updated_at')
    ordering = ('-created_at',)
    list_select_related = ('space',)

    @admin.display(description='Ref')
    def reference(self, obj):
        return obj.reference
