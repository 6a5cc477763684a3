from datetime import time, timedelta
from decimal import Decimal

import pytest
from django.contrib.messages import get_messages
from django.utils import timezone


@pytest.fixture
def flash_messages():
    """Notifications queued on the request that produced a response."""

    def _read(response):
        return [str(m) for m in get_messages(response.wsgi_request)]

    return _read


@pytest.fixture
def make_user(django_user_model):
    """Identity + provisioned profile, the way sign_up creates them."""

    def _make(email="ana@example.com", password="secret123", full_name="Ana Petersen", phone="0761234567"):
        user = django_user_model(username=email, email=email)
        user.set_password(password)
        user.user_metadata = {"full_name": full_name, "phone": phone}
        user.save()
        return user

    return _make


@pytest.fixture
def make_booking():
    from bookings.models import Booking, BookingService

    def _make(user, services=(("Swedish Massage", "450.00", "60 min"),), **fields):
        values = {
            "booking_date": timezone.localdate() + timedelta(days=3),
            "booking_time": time(10, 30),
            "service_address": "12 Long Street, Cape Town",
            "total_amount": sum((Decimal(price) for _, price, _ in services), Decimal("0.00")),
            "payment_method": Booking.PAYMENT_CASH,
        }
        values.update(fields)
        booking = Booking.objects.create(user_id=user.pk, **values)
        for name, price, duration in services:
            BookingService.objects.create(
                booking=booking,
                service_name=name,
                service_price=Decimal(price),
                duration=duration,
            )
        return booking

    return _make
