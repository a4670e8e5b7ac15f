"""Product aggregate: unit price, stock on hand and discount rate."""

from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A sellable item.

    ``discount_rate`` is a multiplicative factor: 1.0 sells at full price,
    0.5 at half price. Stock is only decremented by the stock ledger during
    order placement.
    """

    name: String(required=True, max_length=50)
    price: Float(required=True, min_value=0.0, max_value=99999.99)
    stock: Integer(default=0, min_value=0)
    discount_rate: Float(default=1.0, min_value=0.01, max_value=1.0)
