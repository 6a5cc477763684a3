from django.urls import path

from .views import contact_view, contact_messages_view

urlpatterns = [
    path("", contact_view, name="contact"),
    path("messages/", contact_messages_view, name="contact_messages"),
]
