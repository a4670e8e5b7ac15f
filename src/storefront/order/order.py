"""Order aggregate: header, shipping address and priced line items.

An Order is assembled inside a single unit of work by the order coordinator:
the header and address first, then one OrderItem per requested product, and
finally the totals. ``total_amount`` and ``total_discount`` are written exactly
once, after every item has been priced.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, HasOne, Identifier, Integer, String

from storefront.domain import storefront
from storefront.order.events import OrderPlaced


def _utcnow():
    return datetime.now(UTC)


class OrderStatus(Enum):
    # Placement is the only transition; orders are never moved on from here.
    PENDING = "Pending"


@storefront.entity(part_of="Order")
class Address:
    """Where the order ships to. One per order, created with the header."""

    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    pin: String(required=True, max_length=20)
    state: String(required=True, max_length=100)


@storefront.entity(part_of="Order")
class OrderItem:
    """One requested product and quantity.

    ``unit_price`` is a snapshot taken at purchase time so later catalogue
    price changes never alter historical orders. ``total_price`` is the
    pre-discount line total.
    """

    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.0)
    total_price: Float(required=True, min_value=0.0)


@storefront.aggregate
class Order:
    user_id: Identifier(required=True)
    order_owner: String(required=True, max_length=100)
    phone_number: String(required=True, max_length=20)
    card_number: String(required=True, max_length=19)
    total_amount: Float(default=0.0, min_value=0.0)
    total_discount: Float(default=0.0, min_value=0.0)
    order_status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    address: HasOne(Address)
    items: HasMany(OrderItem)
    created_at: DateTime(default=_utcnow)
    placed_at: DateTime()

    @classmethod
    def create(cls, user_id, order_owner, phone_number, card_number, address):
        """Open a new order header with its shipping address.

        Args:
            user_id: The purchasing user.
            order_owner: Display name the order is placed under.
            phone_number: Contact number for the order.
            card_number: Card the order is recorded against.
            address: Dict with street, city, pin and state.
        """
        return cls(
            user_id=user_id,
            order_owner=order_owner,
            phone_number=phone_number,
            card_number=card_number,
            address=Address(
                street=address.get("street"),
                city=address.get("city"),
                pin=address.get("pin"),
                state=address.get("state"),
            ),
        )

    def add_line_item(self, product_id, quantity, unit_price, total_price):
        """Append a priced line. Only allowed before totals are recorded."""
        if self.placed_at is not None:
            raise ValidationError({"items": ["Items cannot be added to a placed order"]})

        item = OrderItem(
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            total_price=total_price,
        )
        self.add_items(item)
        return item

    def record_totals(self, total_amount, total_discount):
        if self.placed_at is not None:
            raise ValidationError({"total_amount": ["Order totals have already been recorded"]})

        now = _utcnow()
        self.total_amount = total_amount
        self.total_discount = total_discount
        self.placed_at = now

        self.raise_(
            OrderPlaced(
                order_id=str(self.id),
                user_id=str(self.user_id),
                total_amount=total_amount,
                total_discount=total_discount,
                item_count=len(self.items),
                placed_at=now,
            )
        )
