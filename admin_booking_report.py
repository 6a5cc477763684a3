import os
import django
import csv

# 1) Point to your Django settings
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sharmoria.settings")
django.setup()

from django.db.models import Prefetch  # noqa: E402

from bookings.models import Booking, BookingService  # noqa: E402

REPORT_FIELDS = [
    "BookingId",
    "Customer",
    "Email",
    "Phone",
    "Date",
    "Time",
    "Status",
    "PaymentMethod",
    "Services",
    "Total",
]


def build_booking_rows(status=None):
    """
    One row per booking, oldest first.
    Services are joined into a single cell: "Name (duration)".
    Runs with full privilege: every customer's bookings are included.
    """
    qs = (
        Booking.objects
        .select_related("user")
        .prefetch_related(Prefetch("services", queryset=BookingService.objects.order_by("created_at")))
        .order_by("booking_date", "booking_time")
    )
    if status:
        qs = qs.filter(status=status)

    rows = []
    for b in qs:
        rows.append({
            "BookingId": str(b.pk),
            "Customer": b.user.full_name,
            "Email": b.user.email or "",
            "Phone": b.user.phone,
            "Date": b.booking_date.isoformat(),
            "Time": b.booking_time.strftime("%H:%M"),
            "Status": b.status,
            "PaymentMethod": b.payment_method,
            "Services": "; ".join(f"{s.service_name} ({s.duration})" for s in b.services.all()),
            "Total": f"{b.total_amount:.2f}",
        })
    return rows


def build_admin_report(filename="admin_booking_report.csv", status=None):
    rows = build_booking_rows(status=status)

    with open(filename, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        writer.writerows(rows)

    print(f"Admin report created: {filename} ({len(rows)} bookings)")
    return filename


if __name__ == "__main__":
    build_admin_report()
