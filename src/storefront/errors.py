"""Errors raised by the storefront core.

Each error carries a stable ``kind``, a human readable message and the HTTP
status the boundary layer should surface. The core never builds responses
itself; ``storefront.api.errors`` does the translation.
"""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"status": "error", "kind": self.kind, "message": self.message}


class UserNotFound(StorefrontError):
    """Raised when the purchasing user does not exist."""

    status_code = 404

    def __init__(self, user_id):
        self.user_id = str(user_id)
        super().__init__(f"User {self.user_id} doesn't exist.")


class ProductNotFound(StorefrontError):
    """Raised when an ordered item references an unknown product."""

    status_code = 404

    def __init__(self, product_id):
        self.product_id = str(product_id)
        super().__init__(f"Product not found: {self.product_id}.")


class InsufficientStock(StorefrontError):
    """Raised when a product cannot cover the requested quantity."""

    status_code = 400

    def __init__(self, product_id, product_name: str, available: int, requested: int):
        self.product_id = str(product_id)
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(f"Not enough stock for product: {product_name}.")


class InsufficientBalance(StorefrontError):
    """Raised when the user's balance cannot cover the order."""

    status_code = 402

    def __init__(self, balance: float, amount: float):
        self.balance = balance
        self.amount = amount
        super().__init__("Insufficient balance to complete the purchase.")


class OrderItemCreationFailed(StorefrontError):
    status_code = 500

    def __init__(self, product_id, quantity, reason: str | None = None):
        self.product_id = str(product_id)
        self.quantity = quantity
        msg = f"Fail to create order item with this data: product {self.product_id}, quantity {quantity}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class OrderNotFound(StorefrontError):
    status_code = 404

    def __init__(self, order_id):
        self.order_id = str(order_id)
        super().__init__("Order doesn't exist")


class MissingIdentity(StorefrontError):
    """Raised when an authenticated request carries no usable user identity."""

    status_code = 500

    def __init__(self):
        super().__init__("Authenticated user is missing from the request.")
