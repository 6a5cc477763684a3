from unittest import mock

import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from accounts.auth_service import AuthError, AuthResult, AuthService
from accounts.models import Profile

pytestmark = pytest.mark.django_db

SIGNUP_FORM = {
    "full_name": "Lindiwe Mokoena",
    "email": "Lindiwe@Example.com",
    "phone": "+27 76 293 5665",
    "password": "secret123",
    "confirm_password": "secret123",
}


def _signup(client, **overrides):
    return client.post(reverse("signup"), {**SIGNUP_FORM, **overrides})


# ---------- signup ----------


def test_signup_rejects_mismatched_passwords_without_calling_api(client, flash_messages):
    with mock.patch.object(AuthService, "sign_up") as sign_up:
        response = _signup(client, confirm_password="secret124")

    assert response.status_code == 200
    sign_up.assert_not_called()
    assert flash_messages(response) == ["Passwords do not match"]
    assert not get_user_model().objects.exists()


def test_signup_rejects_short_password_without_calling_api(client, flash_messages):
    with mock.patch.object(AuthService, "sign_up") as sign_up:
        response = _signup(client, password="abc12", confirm_password="abc12")

    assert response.status_code == 200
    sign_up.assert_not_called()
    assert flash_messages(response) == ["Password must be at least 6 characters"]


def test_signup_success_redirects_to_login(client, flash_messages):
    response = _signup(client)

    assert response.status_code == 302
    assert response.url == reverse("login")
    assert flash_messages(response) == ["Account created successfully! You can now sign in."]

    user = get_user_model().objects.get()
    assert user.email == "lindiwe@example.com"
    profile = Profile.objects.get(pk=user.pk)
    assert profile.full_name == "Lindiwe Mokoena"
    assert profile.phone == "+27 76 293 5665"
    # signup does not sign in
    assert "_auth_user_id" not in client.session


def test_signup_api_error_is_shown_and_form_stays_filled(client, make_user, flash_messages):
    make_user(email="lindiwe@example.com")

    response = _signup(client)

    assert response.status_code == 200
    assert flash_messages(response) == ["User already registered"]
    assert response.context["form"]["full_name"] == "Lindiwe Mokoena"
    assert 'value="Lindiwe Mokoena"' in response.content.decode()
    assert get_user_model().objects.count() == 1


def test_signup_api_error_without_message_uses_fallback(client, flash_messages):
    with mock.patch.object(AuthService, "sign_up", return_value=AuthResult(error=AuthError(""))):
        response = _signup(client)

    assert response.status_code == 200
    assert flash_messages(response) == ["Failed to create account"]


def test_signup_page_renders(client):
    response = client.get(reverse("signup"))
    assert response.status_code == 200
    content = response.content.decode()
    assert "Create Account" in content
    assert f'action="{reverse("signup")}" data-disable-on-submit' in content


def test_signup_keeps_long_name_and_phone(client):
    response = _signup(client, full_name="N" * 300, phone="+27 " + "1" * 40)

    assert response.status_code == 302
    profile = Profile.objects.get()
    assert profile.full_name == "N" * 300
    assert profile.phone == "+27 " + "1" * 40


# ---------- login / logout ----------


def test_login_page_disables_submit_while_sending(client):
    response = client.get(reverse("login"))

    assert response.status_code == 200
    assert f'action="{reverse("login")}" data-disable-on-submit' in response.content.decode()


def test_login_success_redirects_to_booking(client, make_user, flash_messages):
    user = make_user(email="ana@example.com", password="secret123")

    response = client.post(reverse("login"), {"email": "ANA@example.com", "password": "secret123"})

    assert response.status_code == 302
    assert response.url == reverse("booking")
    assert flash_messages(response) == ["Successfully signed in!"]
    assert client.session["_auth_user_id"] == str(user.pk)


def test_login_failure_shows_api_message(client, make_user, flash_messages):
    make_user(email="ana@example.com", password="secret123")

    response = client.post(reverse("login"), {"email": "ana@example.com", "password": "wrong-pass"})

    assert response.status_code == 200
    assert flash_messages(response) == ["Invalid login credentials"]
    assert response.context["email"] == "ana@example.com"
    assert "_auth_user_id" not in client.session


def test_login_follows_safe_next(client, make_user):
    make_user(email="ana@example.com", password="secret123")

    response = client.post(
        reverse("login"),
        {"email": "ana@example.com", "password": "secret123", "next": reverse("booking_list")},
    )

    assert response.url == reverse("booking_list")


def test_login_ignores_external_next(client, make_user):
    make_user(email="ana@example.com", password="secret123")

    response = client.post(
        reverse("login"),
        {"email": "ana@example.com", "password": "secret123", "next": "https://evil.example.org/"},
    )

    assert response.url == reverse("booking")


def test_logout_signs_out(client, make_user):
    user = make_user()
    client.force_login(user)

    response = client.post(reverse("logout"))

    assert response.status_code == 302
    assert response.url == reverse("login")
    assert "_auth_user_id" not in client.session


def test_logout_requires_post(client):
    assert client.get(reverse("logout")).status_code == 405


# ---------- profile ----------


def test_profile_requires_login(client):
    response = client.get(reverse("profile"))
    assert response.status_code == 302
    assert response.url.startswith(reverse("login"))


def test_profile_update(client, make_user, flash_messages):
    user = make_user(full_name="Ana", phone="1")
    client.force_login(user)

    response = client.post(reverse("profile"), {"full_name": "Ana Petersen", "phone": "0820000000"})

    assert response.status_code == 302
    assert flash_messages(response) == ["Profile updated"]
    profile = Profile.objects.get(pk=user.pk)
    assert profile.full_name == "Ana Petersen"
    assert profile.phone == "0820000000"


def test_profile_update_requires_name(client, make_user, flash_messages):
    user = make_user(full_name="Ana")
    client.force_login(user)

    response = client.post(reverse("profile"), {"full_name": "  ", "phone": ""})

    assert response.status_code == 200
    assert flash_messages(response) == ["Full name is required"]
    assert Profile.objects.get(pk=user.pk).full_name == "Ana"
