from __future__ import annotations


class OrderPlacementError(ValueError):
    """Base class for every rejection raised by the order placement workflow."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidOrder(OrderPlacementError):
    pass


class InvalidCustomer(OrderPlacementError):
    pass


class InsufficientCredit(OrderPlacementError):
    """
    Business-policy rejection: the customer is well formed but their credit rating
    is too low. Deliberately not an InvalidCustomer so callers can handle it apart
    from malformed data.
    """


class InvalidAddress(OrderPlacementError):
    pass
