# users/admin.py

"""
USERS ADMIN REGISTRATION

Registers the custom User model so staff accounts (catalog administrators)
can be created and promoted from Django Admin.
"""

from __future__ import annotations

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from django.contrib.auth.forms import BaseUserCreationForm, UserChangeForm

User = get_user_model()


class StorefrontUserCreationForm(BaseUserCreationForm):
    class Meta:
        model = User
        fields = ("email", "username")


class StorefrontUserChangeForm(UserChangeForm):
    class Meta:
        model = User
        fields = "__all__"


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    add_form = StorefrontUserCreationForm
    form = StorefrontUserChangeForm

    ordering = ("email",)
    list_display = ("email", "username", "is_staff", "is_active", "is_superuser", "created_at")
    list_filter = ("is_staff", "is_active", "is_superuser")
    search_fields = ("email", "username")
    readonly_fields = ("created_at", "updated_at", "last_login")

    fieldsets = (
        (None, {"fields": ("email", "username", "password")}),
        (
            "Permissions",
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                )
            },
        ),
        ("Activity", {"fields": ("last_login", "created_at", "updated_at")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "username",
                    "password1",
                    "password2",
                    "is_staff",
                    "is_active",
                ),
            },
        ),
    )
