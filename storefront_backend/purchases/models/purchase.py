# purchases/models/purchase.py

import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models

User = settings.AUTH_USER_MODEL


class Purchase(models.Model):
    """
    A completed checkout.

    GUARANTEES:
    - Created only by purchases.services.checkout_orchestrator
    - Immutable once written (save() rejects updates)
    - total_amount is the sum of its lines at purchase time
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="purchases",
    )

    total_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    payment_method = models.CharField(
        max_length=32,
        help_text="credit-card/paypal/cash",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "created_at"], name="purchase_user_created_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Purchase records are immutable once created.")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.id} | {self.total_amount}"
