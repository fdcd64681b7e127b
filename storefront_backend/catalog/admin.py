# catalog/admin.py

"""
Admin rules:
- Categories are freely editable.
- Items can be browsed and edited, but stock changes made here bypass the
  create-or-restock service; prefer POST /postItem for intake.
"""

from __future__ import annotations

from django.contrib import admin

from catalog.models import Category, Item


class ItemInline(admin.TabularInline):
    model = Item
    extra = 0
    fields = ("name", "price", "stock_quantity")
    readonly_fields = ("name", "price", "stock_quantity")
    can_delete = False
    show_change_link = True

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)
    inlines = [ItemInline]


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "price", "stock_quantity", "updated_at")
    list_filter = ("category",)
    search_fields = ("name", "description")
    readonly_fields = ("created_at", "updated_at")
