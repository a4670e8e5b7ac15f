"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order was priced, paid from the user's balance and persisted."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    total_amount: Float(required=True)
    total_discount: Float(required=True)
    item_count: Integer(required=True)
    placed_at: DateTime(required=True)
