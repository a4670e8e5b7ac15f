"""Order placement: the all-or-nothing checkout workflow.

``OrderCoordinator.place_order`` reserves stock, prices every line, debits the
purchaser and persists the order inside one unit of work. Any error raised
inside the ``with`` block aborts the unit of work, so stock decrements, the
order header, its address and items are discarded together.
"""

from protean.core.unit_of_work import UnitOfWork
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.errors import (
    InsufficientBalance,
    InsufficientStock,
    OrderItemCreationFailed,
    ProductNotFound,
    UserNotFound,
)
from storefront.order.order import Order
from storefront.product.product import Product
from storefront.product.stock import StockLedger
from storefront.shared.pricing import apply_discount, line_total, truncate_to_whole_units
from storefront.user.balance import BalanceLedger
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _validate_items(items):
    if not items:
        raise ValidationError({"items": ["At least one item is required"]})
    for index, item in enumerate(items):
        if not item.get("product_id"):
            raise ValidationError({"items": [f"Item {index} has no product id"]})
        quantity = item.get("quantity")
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise ValidationError({"items": [f"Item {index} quantity must be a positive integer"]})


class OrderCoordinator:
    """Drives one placement request from start to commit.

    Args:
        domain: The Protean domain whose repositories hold users, products
            and orders.
        unit_of_work: Zero-argument factory returning a context-managed unit
            of work. Defaults to Protean's ``UnitOfWork``.
    """

    def __init__(self, domain, unit_of_work=UnitOfWork):
        self.domain = domain
        self._unit_of_work = unit_of_work

    def place_order(self, user_id, order_owner, phone_number, card_number, address, items) -> str:
        """Place an order and return its id.

        ``items`` is processed in the given order; the first failing item is
        the one reported.

        Raises:
            UserNotFound, ProductNotFound, InsufficientStock,
            OrderItemCreationFailed, InsufficientBalance
        """
        _validate_items(items)
        log = logger.bind(user_id=str(user_id), item_count=len(items))

        with self.domain.domain_context():
            users = self.domain.repository_for(User)
            products = self.domain.repository_for(Product)
            orders = self.domain.repository_for(Order)
            stock_ledger = StockLedger(products)
            balance_ledger = BalanceLedger(users)

            try:
                user = users.get(user_id)
            except ObjectNotFoundError:
                log.warning("order_placement_rejected", reason="user_not_found")
                raise UserNotFound(user_id) from None

            try:
                with self._unit_of_work() as uow:
                    order = Order.create(
                        user_id=user.id,
                        order_owner=order_owner,
                        phone_number=phone_number,
                        card_number=card_number,
                        address=address,
                    )
                    orders.add(order)
                    log = log.bind(order_id=str(order.id))

                    final_price = 0.0
                    total_discount = 0.0
                    for item in items:
                        product_id = item["product_id"]
                        quantity = item["quantity"]

                        try:
                            product = products.get(product_id)
                        except ObjectNotFoundError:
                            raise ProductNotFound(product_id) from None

                        if not stock_ledger.check_availability(product, quantity):
                            raise InsufficientStock(
                                product_id=product.id,
                                product_name=product.name,
                                available=product.stock,
                                requested=quantity,
                            )
                        stock_ledger.reserve(product, quantity, uow)

                        total_price = line_total(quantity, product.price)
                        try:
                            order.add_line_item(
                                product_id=product.id,
                                quantity=quantity,
                                unit_price=product.price,
                                total_price=total_price,
                            )
                        except ValidationError as exc:
                            raise OrderItemCreationFailed(product_id, quantity, reason=str(exc.messages)) from exc

                        discounted = apply_discount(total_price, product.discount_rate)
                        total_discount += total_price - discounted
                        final_price += discounted

                    payable = truncate_to_whole_units(final_price)
                    if not balance_ledger.has_sufficient_funds(user, payable):
                        raise InsufficientBalance(balance=user.balance, amount=payable)

                    balance_ledger.debit(user, final_price, uow)

                    order.record_totals(total_amount=final_price, total_discount=total_discount)
                    orders.add(order)
            except Exception as exc:
                log.warning("order_placement_aborted", error=type(exc).__name__, reason=str(exc))
                raise

            log.info(
                "order_placed",
                total_amount=final_price,
                total_discount=total_discount,
            )
            return str(order.id)
