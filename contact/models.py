import uuid

from django.db import models
from django.db.models import Q


class ContactMessage(models.Model):
    STATUS_NEW = "new"
    STATUS_READ = "read"
    STATUS_REPLIED = "replied"
    STATUS_CHOICES = [
        (STATUS_NEW, "New"),
        (STATUS_READ, "Read"),
        (STATUS_REPLIED, "Replied"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.TextField()
    email = models.EmailField()
    phone = models.TextField(null=True, blank=True)
    message = models.TextField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_NEW)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "contact_messages"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="idx_contact_messages_status"),
            models.Index(fields=["created_at"], name="idx_contact_messages_created"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(status__in=["new", "read", "replied"]),
                name="contact_messages_status_check",
            ),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}> - {self.status}"
