from .cart_entry import CartEntry

__all__ = ["CartEntry"]
