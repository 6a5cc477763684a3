from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .provisioning import provision_profile


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_profile_for_new_user(sender, instance, created, **kwargs):
    if not created:
        return
    # sign_up() attaches the form metadata to the unsaved user
    provision_profile(instance, getattr(instance, "user_metadata", None))
