# accounts/provisioning.py

import logging

from .models import Profile

logger = logging.getLogger(__name__)


def normalize_email(email):
    return (email or "").strip().lower()


def provision_profile(user, metadata=None):
    """
    Create the profile row for a freshly created identity.

    - id and email are copied from the identity.
    - full_name / phone come from the signup metadata; missing -> "".
    - Runs with full privilege (no policy check): the new identity does not
      own a profile yet, so it could not pass the profile insert rule.
    - Idempotent: an existing profile is returned untouched.
    """
    metadata = metadata or {}
    email = normalize_email(user.email) or None

    profile, created = Profile.objects.get_or_create(
        user=user,
        defaults={
            "email": email,
            "full_name": metadata.get("full_name") or "",
            "phone": metadata.get("phone") or "",
        },
    )
    if created:
        logger.info("Provisioned profile for user id=%s", user.pk)
    return profile
