import uuid

from django.db import models
from django.db.models import Q

from accounts.models import Profile, TimestampedQuerySet


class Booking(models.Model):
    PAYMENT_CASH = "cash"
    PAYMENT_CARD = "card"
    PAYMENT_CHOICES = [
        (PAYMENT_CASH, "Cash"),
        (PAYMENT_CARD, "Card"),
    ]

    STATUS_PENDING = "pending"
    STATUS_CONFIRMED = "confirmed"
    STATUS_COMPLETED = "completed"
    STATUS_CANCELLED = "cancelled"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_CONFIRMED, "Confirmed"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_CANCELLED, "Cancelled"),
    ]
    CANCELLABLE_STATUSES = (STATUS_PENDING, STATUS_CONFIRMED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="bookings")
    booking_date = models.DateField()
    booking_time = models.TimeField()
    service_address = models.TextField()
    total_amount = models.DecimalField(max_digits=10, decimal_places=2)
    payment_method = models.CharField(max_length=10, choices=PAYMENT_CHOICES)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    id_document_url = models.TextField(null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TimestampedQuerySet.as_manager()

    class Meta:
        db_table = "bookings"
        ordering = ["-booking_date", "-booking_time"]
        indexes = [
            models.Index(fields=["user"], name="idx_bookings_user_id"),
            models.Index(fields=["status"], name="idx_bookings_status"),
            models.Index(fields=["booking_date"], name="idx_bookings_date"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(payment_method__in=["cash", "card"]),
                name="bookings_payment_method_check",
            ),
            models.CheckConstraint(
                condition=Q(status__in=["pending", "confirmed", "completed", "cancelled"]),
                name="bookings_status_check",
            ),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.booking_date} {self.booking_time} - {self.status}"

    @property
    def is_cancellable(self):
        return self.status in self.CANCELLABLE_STATUSES


class BookingService(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="services")
    service_name = models.CharField(max_length=200)
    service_price = models.DecimalField(max_digits=10, decimal_places=2)
    duration = models.CharField(max_length=50)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "booking_services"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["booking"], name="idx_booking_services_booking"),
        ]

    def __str__(self):
        return f"{self.service_name} ({self.service_price})"
