"""Product creation: command and handler."""

from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=50)
    price: Float(required=True, min_value=0.0, max_value=99999.99)
    stock: Integer(default=0, min_value=0)
    discount_rate: Float(default=1.0, min_value=0.01, max_value=1.0)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product(
            name=command.name,
            price=command.price,
            stock=command.stock or 0,
            discount_rate=command.discount_rate or 1.0,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
