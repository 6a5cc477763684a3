from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="booking", permanent=False), name="home"),
    path("", include("accounts.urls")),
    path("", include("bookings.urls")),
    path("contact/", include("contact.urls")),
    path("admin/", admin.site.urls),
]
