# accounts/policies.py

"""
Row-level access rules, one policy per table.

Each policy answers, for a caller identity (a User or AnonymousUser):

  - select: which rows can be read        -> filter on a queryset
  - insert: may this new row be written   -> bool
  - update: may this row be changed       -> bool (stored row must also be
                                             selectable by the caller)
  - delete: may this row be removed       -> bool

No rule means "denied". Staff working through the admin site and the
provisioning hook write through the ORM directly and are not checked here.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.db.models import Subquery

from bookings.models import Booking, BookingService
from contact.models import ContactMessage

from .models import Profile

logger = logging.getLogger(__name__)


class PolicyViolation(PermissionDenied):
    pass


def uid(identity):
    """Id of an authenticated identity, None for anonymous callers."""
    if identity is None or not getattr(identity, "is_authenticated", False):
        return None
    return identity.pk


class TablePolicy:
    model = None

    def select(self, identity, queryset):
        return queryset.none()

    def insert(self, identity, obj):
        return False

    def update(self, identity, obj):
        return False

    def delete(self, identity, obj):
        return False


class ProfilePolicy(TablePolicy):
    model = Profile

    def select(self, identity, queryset):
        user_id = uid(identity)
        if user_id is None:
            return queryset.none()
        return queryset.filter(pk=user_id)

    def insert(self, identity, obj):
        user_id = uid(identity)
        return user_id is not None and obj.pk == user_id

    update = insert


class BookingPolicy(TablePolicy):
    model = Booking

    def select(self, identity, queryset):
        user_id = uid(identity)
        if user_id is None:
            return queryset.none()
        return queryset.filter(user_id=user_id)

    def insert(self, identity, obj):
        user_id = uid(identity)
        return user_id is not None and obj.user_id == user_id

    update = insert


class BookingServicePolicy(TablePolicy):
    """Visibility follows the parent booking's owner. Append-only."""

    model = BookingService

    def select(self, identity, queryset):
        user_id = uid(identity)
        if user_id is None:
            return queryset.none()
        return queryset.filter(booking__user_id=user_id)

    def insert(self, identity, obj):
        user_id = uid(identity)
        if user_id is None or obj.booking_id is None:
            return False
        return Booking.objects.filter(pk=obj.booking_id, user_id=user_id).exists()


class ContactMessagePolicy(TablePolicy):
    """Anyone may write, only the owner of the matching profile email may read. Append-only."""

    model = ContactMessage

    def select(self, identity, queryset):
        user_id = uid(identity)
        if user_id is None:
            return queryset.none()
        own_email = Profile.objects.filter(pk=user_id).values("email")[:1]
        return queryset.filter(email=Subquery(own_email))

    def insert(self, identity, obj):
        return True


POLICIES = {
    policy.model: policy
    for policy in (ProfilePolicy(), BookingPolicy(), BookingServicePolicy(), ContactMessagePolicy())
}


def policy_for(model):
    try:
        return POLICIES[model]
    except KeyError:
        raise LookupError(f"No access policy registered for {model.__name__}")


# ---------- checks ----------


def visible(identity, model, queryset=None):
    if queryset is None:
        queryset = model._default_manager.all()
    return policy_for(model).select(identity, queryset)


def can_insert(identity, obj):
    return policy_for(type(obj)).insert(identity, obj)


def can_update(identity, obj):
    model = type(obj)
    if obj.pk is None or not visible(identity, model).filter(pk=obj.pk).exists():
        return False
    return policy_for(model).update(identity, obj)


def can_delete(identity, obj):
    model = type(obj)
    if obj.pk is None or not visible(identity, model).filter(pk=obj.pk).exists():
        return False
    return policy_for(model).delete(identity, obj)


# ---------- guarded writes ----------


def _deny(operation, identity, obj):
    logger.warning(
        "Policy denied %s on %s for identity=%s",
        operation,
        type(obj)._meta.db_table,
        uid(identity),
    )
    raise PolicyViolation(f"{operation} on {type(obj)._meta.db_table} is not allowed")


def insert(identity, obj):
    if not can_insert(identity, obj):
        _deny("insert", identity, obj)
    obj.save(force_insert=True)
    return obj


def update(identity, obj, fields=None):
    if not can_update(identity, obj):
        _deny("update", identity, obj)
    if fields is not None:
        fields = list(fields)
        if hasattr(obj, "updated_at") and "updated_at" not in fields:
            fields.append("updated_at")
    obj.save(update_fields=fields)
    return obj


def delete(identity, obj):
    if not can_delete(identity, obj):
        _deny("delete", identity, obj)
    obj.delete()
