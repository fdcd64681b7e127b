# purchases/api/urls.py

from django.urls import path

from purchases.api.views import CheckoutView, PurchaseHistoryView

urlpatterns = [
    path("checkout", CheckoutView.as_view(), name="checkout"),
    path("getPurchases", PurchaseHistoryView.as_view(), name="get-purchases"),
]
