"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    """Standard CRUD from the base repository, plus per-user lookups."""

    def for_user(self, user_id) -> list[Order]:
        """All orders placed by ``user_id``, oldest first."""
        return self._dao.query.filter(user_id=str(user_id)).order_by("created_at").all().items
