"""
PATH: users/management/commands/ensure_superuser.py

Production-safe superuser bootstrap.

- Reads AUTO_ADMIN_EMAIL + AUTO_ADMIN_PASSWORD (+ optional AUTO_ADMIN_USERNAME) from env.
- Idempotent: creates the superuser if missing; re-promotes + resets password if it exists.
- Never prints the password.
"""

from __future__ import annotations

import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction


class Command(BaseCommand):
    help = "Create/update an initial superuser from env vars (idempotent)."

    def handle(self, *args, **options):
        email = (os.environ.get("AUTO_ADMIN_EMAIL") or "").strip()
        password = (os.environ.get("AUTO_ADMIN_PASSWORD") or "").strip()
        username = (os.environ.get("AUTO_ADMIN_USERNAME") or "").strip()

        if not email or not password:
            self.stdout.write(self.style.WARNING("AUTO_ADMIN_* env vars not set. Skipping."))
            return

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()

            if user:
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.set_password(password)
                user.save(update_fields=["is_active", "is_staff", "is_superuser", "password"])
                self.stdout.write(self.style.SUCCESS(f"Superuser ensured: {email} (updated)"))
                return

            User.objects.create_superuser(email=email, password=password, username=username)

        self.stdout.write(self.style.SUCCESS(f"Superuser ensured: {email} (created)"))
