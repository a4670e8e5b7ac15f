"""User aggregate: the purchasing account and its spendable balance."""

from enum import Enum

from protean.fields import Float, String

from storefront.domain import storefront


class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"


@storefront.aggregate
class User:
    """A registered shopper.

    Order placement only ever reads and debits ``balance``; everything else
    about the account is owned by the identity layer that registers users.
    """

    email: String(required=True, max_length=254, unique=True)
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    balance: Float(default=0.0, min_value=0.0)
    role: String(choices=UserRole, default=UserRole.USER.value)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
