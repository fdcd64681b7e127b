# users/models.py

"""
CUSTOM USER MODEL

Identity rules:
- email and username are both required and unique (case-insensitive at the API layer)
- password is stored only as a salted one-way hash (Django password hashers)
- login is by email; username is a display handle carried in the bearer token
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)
from django.core.exceptions import ValidationError
from django.db import models


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def create_user(self, email=None, password=None, **extra_fields):
        """
        Rules:
        - email is required
        - username defaults to the email local-part (uniqueness ensured)
        - no password -> unusable password (cannot log in)
        """
        email = (email or "").strip()
        if not email:
            raise ValueError("An email address is required")

        email = self.normalize_email(email)

        username = (extra_fields.pop("username", "") or "").strip()
        if not username:
            base = (email.split("@")[0] or "user").strip().lower()
            candidate = base
            i = 1
            while self.model.objects.filter(username__iexact=candidate).exists():
                i += 1
                candidate = f"{base}{i}"
            username = candidate

        extra_fields.setdefault("is_active", True)

        user = self.model(email=email, username=username, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.full_clean(exclude=["password"])
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")

        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email=email, password=password, **extra_fields)


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(unique=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(
        default=False,
        help_text="Staff users may administer the catalog and the Django admin.",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        if self.email:
            self.email = self.__class__.objects.normalize_email(self.email).strip()
        self.username = (self.username or "").strip()

        if not self.username:
            raise ValidationError({"username": "username is required"})

    def __str__(self):
        return f"{self.username} <{self.email}>"
