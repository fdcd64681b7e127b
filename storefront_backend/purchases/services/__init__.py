from .checkout_orchestrator import accepted_payment_methods, checkout_cart
from .exceptions import (
    CheckoutError,
    EmptyCartError,
    InvalidPaymentMethodError,
    MissingPaymentMethodError,
    StockValidationError,
)

__all__ = [
    "CheckoutError",
    "EmptyCartError",
    "InvalidPaymentMethodError",
    "MissingPaymentMethodError",
    "StockValidationError",
    "accepted_payment_methods",
    "checkout_cart",
]
