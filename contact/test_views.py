import pytest
from django.urls import reverse

from contact.models import ContactMessage

pytestmark = pytest.mark.django_db

FORM = {
    "name": "Visitor",
    "email": "Visitor@Example.com",
    "phone": "",
    "message": "Do you travel to Durbanville?",
}


def test_anonymous_visitor_can_send_message(client, flash_messages):
    response = client.post(reverse("contact"), FORM)

    assert response.status_code == 302
    assert response.url == reverse("contact")
    assert flash_messages(response) == ["Message sent! We will get back to you soon."]

    msg = ContactMessage.objects.get()
    assert msg.email == "visitor@example.com"
    assert msg.phone is None
    assert msg.status == ContactMessage.STATUS_NEW


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"name": ""}, "Name is required"),
        ({"message": "   "}, "Message is required"),
        ({"email": "not-an-email"}, "Enter a valid email address"),
    ],
)
def test_invalid_message_is_not_saved(client, flash_messages, overrides, error):
    response = client.post(reverse("contact"), {**FORM, **overrides})

    assert response.status_code == 200
    assert flash_messages(response) == [error]
    assert not ContactMessage.objects.exists()


def test_form_is_prefilled_for_signed_in_user(client, make_user):
    client.force_login(make_user(email="ana@example.com", full_name="Ana Petersen", phone="0761234567"))

    response = client.get(reverse("contact"))

    assert response.context["form"] == {
        "name": "Ana Petersen",
        "email": "ana@example.com",
        "phone": "0761234567",
        "message": "",
    }


def test_anonymous_form_is_empty(client):
    response = client.get(reverse("contact"))
    assert response.context["form"]["email"] == ""


def test_message_list_shows_messages_sent_with_own_email(client, make_user):
    user = make_user(email="ana@example.com")
    client.post(reverse("contact"), {**FORM, "email": "ANA@example.com", "message": "First question"})
    client.post(reverse("contact"), {**FORM, "message": "Somebody else"})

    client.force_login(user)
    response = client.get(reverse("contact_messages"))

    content = response.content.decode()
    assert "First question" in content
    assert "Somebody else" not in content


def test_message_list_requires_login(client):
    response = client.get(reverse("contact_messages"))

    assert response.status_code == 302
    assert response.url.startswith(reverse("login"))


def test_long_name_and_phone_are_kept(client):
    client.post(reverse("contact"), {**FORM, "name": "V" * 300, "phone": "0" * 40})

    msg = ContactMessage.objects.get()
    assert msg.name == "V" * 300
    assert msg.phone == "0" * 40


def test_overlong_email_is_rejected(client, flash_messages):
    # 260 characters, each part within the validator's limits
    email = "a" * 64 + "@" + "b" * 63 + "." + "c" * 63 + "." + "d" * 63 + ".com"

    response = client.post(reverse("contact"), {**FORM, "email": email})

    assert response.status_code == 200
    assert flash_messages(response) == ["Enter a valid email address"]
    assert not ContactMessage.objects.exists()
