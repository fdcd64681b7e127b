from django.contrib import admin

from .models import Purchase, PurchaseItem

# =====================================================
# PURCHASE ITEM INLINE (READ-ONLY)
# =====================================================


class PurchaseItemInline(admin.TabularInline):
    model = PurchaseItem
    extra = 0
    can_delete = False
    readonly_fields = (
        "item",
        "item_name",
        "quantity",
        "unit_price",
        "line_total",
    )

    def has_add_permission(self, request, obj=None):
        return False


# =====================================================
# PURCHASE ADMIN (IMMUTABLE)
# =====================================================


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "user",
        "total_amount",
        "payment_method",
        "created_at",
    )

    readonly_fields = (
        "id",
        "user",
        "total_amount",
        "payment_method",
        "created_at",
    )

    search_fields = ("user__email", "user__username")
    list_filter = ("payment_method", "created_at")

    inlines = [PurchaseItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
