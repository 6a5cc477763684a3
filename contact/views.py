import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.shortcuts import redirect, render

from accounts import policies
from accounts.models import Profile
from accounts.provisioning import normalize_email

from .models import ContactMessage

logger = logging.getLogger(__name__)


def _initial_form(user):
    """Signed-in users get their own details prefilled."""
    profile = policies.visible(user, Profile).first()
    if profile is None:
        return {"name": "", "email": "", "phone": "", "message": ""}
    return {
        "name": profile.full_name,
        "email": profile.email or "",
        "phone": profile.phone,
        "message": "",
    }


def contact_view(request):
    """
    Contact form, open to everyone (signed in or not).
    """
    if request.method == "POST":
        form = {
            "name": (request.POST.get("name") or "").strip(),
            "email": normalize_email(request.POST.get("email")),
            "phone": (request.POST.get("phone") or "").strip(),
            "message": (request.POST.get("message") or "").strip(),
        }

        error = None
        if not form["name"]:
            error = "Name is required"
        elif not form["message"]:
            error = "Message is required"
        else:
            try:
                validate_email(form["email"])
            except ValidationError:
                error = "Enter a valid email address"
            if len(form["email"]) > ContactMessage._meta.get_field("email").max_length:
                error = "Enter a valid email address"

        if error:
            messages.error(request, error)
            return render(request, "contact.html", {"form": form})

        msg = policies.insert(request.user, ContactMessage(
            name=form["name"],
            email=form["email"],
            phone=form["phone"] or None,
            message=form["message"],
        ))
        logger.info("Contact message %s received from %s", msg.pk, msg.email)
        messages.success(request, "Message sent! We will get back to you soon.")
        return redirect("contact")

    return render(request, "contact.html", {"form": _initial_form(request.user)})


@login_required
def contact_messages_view(request):
    contact_messages = policies.visible(request.user, ContactMessage)
    return render(request, "contact_messages.html", {"contact_messages": contact_messages})
