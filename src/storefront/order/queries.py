"""Read-side lookups over placed orders."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.errors import OrderNotFound, UserNotFound
from storefront.order.order import Order
from storefront.user.user import User


def mask_card_number(card_number: str | None) -> str | None:
    """Keep only the last four digits visible."""
    if not card_number:
        return card_number
    visible = card_number[-4:]
    return "*" * (len(card_number) - len(visible)) + visible


def _summary(order) -> dict:
    return {
        "id": str(order.id),
        "created_at": order.created_at,
        "total_discount": order.total_discount,
        "total_amount": order.total_amount,
        "order_status": order.order_status,
    }


def _detail(order) -> dict:
    address = order.address
    return {
        **_summary(order),
        "user_id": str(order.user_id),
        "order_owner": order.order_owner,
        "phone_number": order.phone_number,
        "card_number": mask_card_number(order.card_number),
        "address": (
            {
                "street": address.street,
                "city": address.city,
                "pin": address.pin,
                "state": address.state,
            }
            if address
            else None
        ),
        "items": [
            {
                "id": str(item.id),
                "product_id": str(item.product_id),
                "quantity": item.quantity,
                "unit_price": item.unit_price,
                "total_price": item.total_price,
            }
            for item in order.items
        ],
    }


def list_orders(user_id) -> list[dict]:
    """Summaries of every order ``user_id`` has placed, oldest first.

    An empty list means the user exists but has no orders yet.
    """
    try:
        current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise UserNotFound(user_id) from None

    orders = current_domain.repository_for(Order).for_user(user_id)
    return [_summary(order) for order in orders]


def get_order(order_id, viewer_id=None, viewer_is_admin=False) -> dict:
    """Full detail for one order.

    When ``viewer_id`` is given, a non-admin viewer only sees their own
    orders; anyone else's order is reported as missing.
    """
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id) from None

    if viewer_id is not None and not viewer_is_admin and str(order.user_id) != str(viewer_id):
        raise OrderNotFound(order_id)

    return _detail(order)
