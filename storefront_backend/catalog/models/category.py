# catalog/models/category.py

from django.db import models


class Category(models.Model):
    """
    Menu section (e.g. burgers, sides, drinks). Parent of items.
    """

    name = models.CharField(max_length=255, unique=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name
