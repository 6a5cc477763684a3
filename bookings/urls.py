from django.urls import path

from .views import booking_view, booking_list_view, cancel_booking_view

urlpatterns = [
    path("booking/", booking_view, name="booking"),
    path("bookings/", booking_list_view, name="booking_list"),
    path("bookings/<uuid:booking_id>/cancel/", cancel_booking_view, name="cancel_booking"),
]
