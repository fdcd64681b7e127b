from django.contrib import admin

from .models import CartEntry

# =====================================================
# CART ENTRY ADMIN (READ-ONLY)
# =====================================================


@admin.register(CartEntry)
class CartEntryAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "user",
        "item",
        "quantity",
        "line_total",
        "updated_at",
    )

    readonly_fields = (
        "id",
        "user",
        "item",
        "quantity",
        "line_total",
        "created_at",
        "updated_at",
    )

    list_select_related = ("user", "item")
    search_fields = ("user__email", "user__username", "item__name")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
