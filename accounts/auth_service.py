# accounts/auth_service.py

import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.base_user import AbstractBaseUser
from django.db import DatabaseError, IntegrityError, transaction
from django.utils.module_loading import import_string

from .provisioning import normalize_email

logger = logging.getLogger(__name__)


@dataclass
class AuthError:
    message: str


@dataclass
class AuthResult:
    error: Optional[AuthError] = None
    user: Optional[AbstractBaseUser] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AuthService:
    """
    Sign up / sign in / sign out for one request.

    Expected failures never raise: they come back as ``AuthResult.error``
    with a message the view can show as-is.
    """

    def __init__(self, request):
        self.request = request

    def sign_up(self, email: str, password: str, full_name: str = "", phone: str = "") -> AuthResult:
        email = normalize_email(email)
        if not email:
            return AuthResult(error=AuthError("Email is required"))
        if not password:
            return AuthResult(error=AuthError("Password is required"))

        User = get_user_model()
        if User.objects.filter(username__iexact=email).exists():
            logger.warning("Signup refused, email already registered: %s", email)
            return AuthResult(error=AuthError("User already registered"))

        user = User(username=email, email=email)
        user.set_password(password)
        # picked up by the post_save provisioning receiver
        user.user_metadata = {"full_name": (full_name or "").strip(), "phone": (phone or "").strip()}

        try:
            with transaction.atomic():
                user.save()
        except IntegrityError as e:
            logger.error("Signup failed for %s: %s", email, e)
            return AuthResult(error=AuthError("User already registered"))
        except DatabaseError as e:
            logger.error("Signup failed for %s: %s", email, e)
            return AuthResult(error=AuthError("Database error saving new user"))

        logger.info("User %s signed up (id=%s)", email, user.pk)
        return AuthResult(user=user)

    def sign_in(self, email: str, password: str) -> AuthResult:
        email = normalize_email(email)
        user = authenticate(self.request, username=email, password=password)
        if user is None:
            logger.warning("Invalid credentials for %s", email)
            return AuthResult(error=AuthError("Invalid login credentials"))

        login(self.request, user)
        logger.info("User %s signed in", email)
        return AuthResult(user=user)

    def sign_out(self) -> AuthResult:
        user = self.request.user
        logout(self.request)
        if getattr(user, "is_authenticated", False):
            logger.info("User id=%s signed out", user.pk)
        return AuthResult()


def get_auth_service(request) -> AuthService:
    cls = import_string(settings.AUTH_SERVICE_CLASS)
    return cls(request)
