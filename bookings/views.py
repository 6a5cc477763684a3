import logging
from datetime import date, time

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.db.models import Prefetch
from django.http import Http404
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.http import require_POST

from accounts import policies
from accounts.models import Profile

from .catalog import catalog_items, lookup_services, total_for
from .models import Booking, BookingService

logger = logging.getLogger(__name__)

PAYMENT_METHODS = [value for value, _ in Booking.PAYMENT_CHOICES]


def _read_booking_form(post):
    return {
        "services": post.getlist("services"),
        "booking_date": (post.get("booking_date") or "").strip(),
        "booking_time": (post.get("booking_time") or "").strip(),
        "service_address": (post.get("service_address") or "").strip(),
        "payment_method": (post.get("payment_method") or "").strip(),
        "id_document_url": (post.get("id_document_url") or "").strip(),
        "notes": (post.get("notes") or "").strip(),
    }


def _validate_booking_form(form):
    """
    Returns (error, cleaned). Exactly one of them is None.
    """
    items, unknown = lookup_services(form["services"])
    if unknown:
        return f"Unknown service: {', '.join(unknown)}", None
    if not items:
        return "Select at least one service", None

    try:
        booking_date = date.fromisoformat(form["booking_date"])
    except ValueError:
        return "Enter a valid date", None
    if booking_date < timezone.localdate():
        return "Booking date cannot be in the past", None

    try:
        booking_time = time.fromisoformat(form["booking_time"])
    except ValueError:
        return "Enter a valid time", None
    # stored as a naive local time
    if booking_time.tzinfo is not None:
        return "Enter a valid time", None

    if not form["service_address"]:
        return "Service address is required", None

    if form["payment_method"] not in PAYMENT_METHODS:
        return "Select cash or card as payment method", None

    return None, {
        "items": items,
        "booking_date": booking_date,
        "booking_time": booking_time,
    }


@login_required
def booking_view(request):
    """
    New booking: one or more catalog services at an address, date and time.
    Booking and its services are inserted together, each through the
    access policies of the signed-in user.
    """
    form = {"services": [], "payment_method": Booking.PAYMENT_CASH}

    if request.method == "POST":
        form = _read_booking_form(request.POST)
        error, cleaned = _validate_booking_form(form)
        if error:
            messages.error(request, error)
            return render(request, "booking.html", {"form": form, "catalog": catalog_items()})

        items = cleaned["items"]
        with transaction.atomic():
            booking = policies.insert(request.user, Booking(
                user_id=request.user.pk,
                booking_date=cleaned["booking_date"],
                booking_time=cleaned["booking_time"],
                service_address=form["service_address"],
                total_amount=total_for(items),
                payment_method=form["payment_method"],
                id_document_url=form["id_document_url"] or None,
                notes=form["notes"] or None,
            ))
            for item in items:
                policies.insert(request.user, BookingService(
                    booking=booking,
                    service_name=item["name"],
                    service_price=item["price"],
                    duration=item["duration"],
                ))

        logger.info(
            "Booking %s created by user id=%s (%d services, total %s)",
            booking.pk, request.user.pk, len(items), booking.total_amount,
        )
        messages.success(request, "Booking request received!")
        return redirect("booking_list")

    profile = policies.visible(request.user, Profile).first()
    return render(request, "booking.html", {
        "form": form,
        "catalog": catalog_items(),
        "profile": profile,
    })


@login_required
def booking_list_view(request):
    bookings = policies.visible(request.user, Booking).prefetch_related(
        Prefetch("services", queryset=policies.visible(request.user, BookingService))
    )
    return render(request, "booking_list.html", {"bookings": bookings})


@login_required
@require_POST
def cancel_booking_view(request, booking_id):
    try:
        booking = policies.visible(request.user, Booking).get(pk=booking_id)
    except Booking.DoesNotExist:
        raise Http404("Booking not found")

    if not booking.is_cancellable:
        messages.error(request, f"A {booking.status} booking cannot be cancelled")
        return redirect("booking_list")

    booking.status = Booking.STATUS_CANCELLED
    policies.update(request.user, booking, fields=["status"])
    logger.info("Booking %s cancelled by user id=%s", booking.pk, request.user.pk)
    messages.success(request, "Booking cancelled")
    return redirect("booking_list")
