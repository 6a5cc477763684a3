from django.contrib import admin
from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("email", "full_name", "phone", "created_at")
    search_fields = ("email", "full_name", "phone")
    readonly_fields = ("created_at", "updated_at")
