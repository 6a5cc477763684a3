from django.contrib import admin
from .models import ContactMessage


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "phone", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("name", "email", "message")
    readonly_fields = ("created_at",)
    actions = ["mark_read", "mark_replied"]

    @admin.action(description="Mark selected messages as read")
    def mark_read(self, request, queryset):
        updated = queryset.update(status=ContactMessage.STATUS_READ)
        self.message_user(request, f"{updated} message(s) marked as read.")

    @admin.action(description="Mark selected messages as replied")
    def mark_replied(self, request, queryset):
        updated = queryset.update(status=ContactMessage.STATUS_REPLIED)
        self.message_user(request, f"{updated} message(s) marked as replied.")
