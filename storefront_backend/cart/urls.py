# cart/urls.py

from django.urls import path

from .views import (
    AddToCartView,
    CartItemsView,
    CartSummaryView,
    ClearCartView,
    DeleteCartItemView,
)

urlpatterns = [
    path("addToCart", AddToCartView.as_view(), name="cart-add"),
    path(
        "deleteCartItem/<int:cart_item_id>",
        DeleteCartItemView.as_view(),
        name="cart-remove-one",
    ),
    path("getCartItems", CartItemsView.as_view(), name="cart-items"),
    path("getCartSummary", CartSummaryView.as_view(), name="cart-summary"),
    path("clearCart", ClearCartView.as_view(), name="cart-clear"),
]
