# purchases/services/exceptions.py


class CheckoutError(Exception):
    """Base checkout exception"""


class EmptyCartError(CheckoutError):
    pass


class StockValidationError(CheckoutError):
    pass


class MissingPaymentMethodError(CheckoutError):
    pass


class InvalidPaymentMethodError(CheckoutError):
    pass
