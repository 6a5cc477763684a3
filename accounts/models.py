from django.conf import settings
from django.db import models
from django.utils import timezone


class TimestampedQuerySet(models.QuerySet):
    """
    Bulk updates skip ``auto_now``, so refresh ``updated_at`` here as well:
    every update of a row bumps its timestamp, whichever way it is written.
    """

    def update(self, **kwargs):
        kwargs.setdefault("updated_at", timezone.now())
        return super().update(**kwargs)


class Profile(models.Model):
    # primary key is the auth identity itself, so profile.pk == user.pk
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="profile",
    )
    # staff created from the command line may have no email
    email = models.EmailField(unique=True, null=True, blank=True)
    full_name = models.TextField(blank=True)
    phone = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TimestampedQuerySet.as_manager()

    class Meta:
        db_table = "profiles"

    def __str__(self):
        return f"{self.full_name or '-'} <{self.email}>"
