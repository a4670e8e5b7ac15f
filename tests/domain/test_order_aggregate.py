import pytest
from protean.exceptions import ValidationError
from protean.utils import DomainObjects
from protean.utils.reflection import declared_fields
from storefront.order.events import OrderPlaced
from storefront.order.order import Address, Order, OrderItem, OrderStatus

ADDRESS = {"street": "1 Infinite Loop", "city": "Cupertino", "pin": "95014", "state": "CA"}


def _order(**overrides):
    kwargs = {
        "user_id": "user-001",
        "order_owner": "Jane Doe",
        "phone_number": "+14085551234",
        "card_number": "4242424242424242",
        "address": ADDRESS,
    }
    kwargs.update(overrides)
    return Order.create(**kwargs)


def test_order_aggregate_element_type():
    assert Order.element_type == DomainObjects.AGGREGATE


def test_order_item_and_address_are_entities():
    assert OrderItem.element_type == DomainObjects.ENTITY
    assert Address.element_type == DomainObjects.ENTITY


def test_order_aggregate_has_defined_fields():
    assert all(
        field_name in declared_fields(Order)
        for field_name in [
            "user_id",
            "order_owner",
            "phone_number",
            "card_number",
            "total_amount",
            "total_discount",
            "order_status",
            "address",
            "items",
            "created_at",
        ]
    )


class TestOrderCreation:
    def test_header_fields(self):
        order = _order()
        assert str(order.user_id) == "user-001"
        assert order.order_owner == "Jane Doe"
        assert order.phone_number == "+14085551234"
        assert order.card_number == "4242424242424242"

    def test_address_is_attached(self):
        order = _order()
        assert order.address.street == "1 Infinite Loop"
        assert order.address.city == "Cupertino"
        assert order.address.pin == "95014"
        assert order.address.state == "CA"

    def test_new_order_is_pending_with_zero_totals(self):
        order = _order()
        assert order.order_status == OrderStatus.PENDING.value
        assert order.total_amount == 0.0
        assert order.total_discount == 0.0
        assert len(order.items) == 0
        assert order.created_at is not None
        assert order.placed_at is None

    def test_status_outside_the_vocabulary_is_rejected(self):
        with pytest.raises(ValidationError):
            Order(
                user_id="user-001",
                order_owner="Jane Doe",
                phone_number="+14085551234",
                card_number="4242424242424242",
                order_status="Shipped",
            )

    def test_address_requires_pin(self):
        with pytest.raises(ValidationError):
            _order(address={"street": "1 Main", "city": "Town", "state": "CA"})


class TestAddLineItem:
    def test_item_is_appended_with_price_snapshot(self):
        order = _order()
        item = order.add_line_item(product_id="prod-001", quantity=2, unit_price=20.0, total_price=40.0)

        assert len(order.items) == 1
        assert str(item.product_id) == "prod-001"
        assert item.quantity == 2
        assert item.unit_price == 20.0
        assert item.total_price == 40.0

    def test_items_keep_request_order(self):
        order = _order()
        order.add_line_item(product_id="prod-a", quantity=1, unit_price=5.0, total_price=5.0)
        order.add_line_item(product_id="prod-b", quantity=3, unit_price=2.0, total_price=6.0)

        assert [str(item.product_id) for item in order.items] == ["prod-a", "prod-b"]

    def test_zero_quantity_is_rejected(self):
        order = _order()
        with pytest.raises(ValidationError):
            order.add_line_item(product_id="prod-001", quantity=0, unit_price=20.0, total_price=0.0)

    def test_items_cannot_be_added_after_totals_are_recorded(self):
        order = _order()
        order.add_line_item(product_id="prod-001", quantity=1, unit_price=10.0, total_price=10.0)
        order.record_totals(total_amount=10.0, total_discount=0.0)

        with pytest.raises(ValidationError) as exc:
            order.add_line_item(product_id="prod-002", quantity=1, unit_price=10.0, total_price=10.0)
        assert "items" in exc.value.messages


class TestRecordTotals:
    def test_totals_are_written(self):
        order = _order()
        order.add_line_item(product_id="prod-001", quantity=1, unit_price=10.0, total_price=10.0)
        order.record_totals(total_amount=5.0, total_discount=5.0)

        assert order.total_amount == 5.0
        assert order.total_discount == 5.0
        assert order.placed_at is not None

    def test_order_placed_event_is_raised(self):
        order = _order()
        order.add_line_item(product_id="prod-001", quantity=2, unit_price=20.0, total_price=40.0)
        order._events.clear()

        order.record_totals(total_amount=40.0, total_discount=0.0)

        assert len(order._events) == 1
        event = order._events[0]
        assert event.__class__.__name__ == OrderPlaced.__name__
        assert str(event.order_id) == str(order.id)
        assert str(event.user_id) == "user-001"
        assert event.total_amount == 40.0
        assert event.total_discount == 0.0
        assert event.item_count == 1

    def test_totals_are_written_only_once(self):
        order = _order()
        order.record_totals(total_amount=10.0, total_discount=0.0)

        with pytest.raises(ValidationError) as exc:
            order.record_totals(total_amount=20.0, total_discount=0.0)
        assert "total_amount" in exc.value.messages
        assert order.total_amount == 10.0
