import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from . import policies
from .auth_service import get_auth_service
from .models import Profile

logger = logging.getLogger(__name__)


def signup_view(request):
    """
    Signup page.
      - password / confirm_password must match
      - password must be at least MIN_PASSWORD_LENGTH characters
    Both are checked here, before the auth service is called at all.
    On success -> login page (the user is not signed in yet).
    """
    form = {
        "full_name": "",
        "email": "",
        "phone": "",
    }

    if request.method == "POST":
        form = {
            "full_name": (request.POST.get("full_name") or "").strip(),
            "email": (request.POST.get("email") or "").strip(),
            "phone": (request.POST.get("phone") or "").strip(),
        }
        password = request.POST.get("password") or ""
        confirm_password = request.POST.get("confirm_password") or ""

        if password != confirm_password:
            messages.error(request, "Passwords do not match")
            return render(request, "signup.html", {"form": form})

        if len(password) < settings.MIN_PASSWORD_LENGTH:
            messages.error(request, f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters")
            return render(request, "signup.html", {"form": form})

        result = get_auth_service(request).sign_up(
            form["email"],
            password,
            form["full_name"],
            form["phone"],
        )
        if result.error:
            messages.error(request, result.error.message or "Failed to create account")
            return render(request, "signup.html", {"form": form})

        messages.success(request, "Account created successfully! You can now sign in.")
        return redirect("login")

    return render(request, "signup.html", {"form": form})


def login_view(request):
    """Login: on success go to the booking page (or a safe ?next=)."""
    email = ""
    next_url = request.POST.get("next") or request.GET.get("next") or ""

    if request.method == "POST":
        email = (request.POST.get("email") or "").strip()
        password = request.POST.get("password") or ""

        result = get_auth_service(request).sign_in(email, password)
        if result.error:
            messages.error(request, result.error.message or "Failed to sign in")
            return render(request, "login.html", {"email": email, "next": next_url})

        messages.success(request, "Successfully signed in!")
        if next_url and url_has_allowed_host_and_scheme(
            next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
        ):
            return redirect(next_url)
        return redirect("booking")

    return render(request, "login.html", {"email": email, "next": next_url})


@require_POST
def logout_view(request):
    get_auth_service(request).sign_out()
    messages.info(request, "You have been signed out.")
    return redirect("login")


@login_required
def profile_view(request):
    """Own profile: view, and update full name / phone."""
    try:
        profile = policies.visible(request.user, Profile).get()
    except Profile.DoesNotExist:
        logger.error("Signed-in user id=%s has no profile", request.user.pk)
        messages.error(request, "Profile not found")
        return redirect("booking")

    if request.method == "POST":
        profile.full_name = (request.POST.get("full_name") or "").strip()
        profile.phone = (request.POST.get("phone") or "").strip()

        if not profile.full_name:
            messages.error(request, "Full name is required")
            return render(request, "profile.html", {"profile": profile})

        policies.update(request.user, profile, fields=["full_name", "phone"])
        messages.success(request, "Profile updated")
        return redirect("profile")

    return render(request, "profile.html", {"profile": profile})
