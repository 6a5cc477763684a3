from django.contrib import admin
from .models import Booking, BookingService


class BookingServiceInline(admin.TabularInline):
    model = BookingService
    extra = 0
    readonly_fields = ("created_at",)


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("user", "booking_date", "booking_time", "total_amount", "payment_method", "status")
    list_filter = ("status", "payment_method", "booking_date")
    search_fields = ("user__email", "user__full_name", "service_address")
    readonly_fields = ("created_at", "updated_at")
    inlines = [BookingServiceInline]
    actions = ["mark_confirmed", "mark_completed"]

    @admin.action(description="Mark selected bookings as confirmed")
    def mark_confirmed(self, request, queryset):
        updated = queryset.filter(status=Booking.STATUS_PENDING).update(status=Booking.STATUS_CONFIRMED)
        self.message_user(request, f"{updated} booking(s) confirmed.")

    @admin.action(description="Mark selected bookings as completed")
    def mark_completed(self, request, queryset):
        updated = queryset.filter(status=Booking.STATUS_CONFIRMED).update(status=Booking.STATUS_COMPLETED)
        self.message_user(request, f"{updated} booking(s) completed.")
