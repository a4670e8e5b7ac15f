"""Stock ledger: availability checks and decrements inside a unit of work."""

from storefront.errors import InsufficientStock
from storefront.shared.ledger import Ledger


class StockLedger(Ledger):
    def check_availability(self, product, quantity) -> bool:
        return product.stock >= quantity

    def reserve(self, product, quantity, uow):
        """Write ``product.stock - quantity`` through the given unit of work.

        Nothing outside ``uow`` sees the decrement until it commits; an abort
        restores the previous stock level.
        """
        self._ensure_in_progress(uow)
        if not self.check_availability(product, quantity):
            raise InsufficientStock(
                product_id=product.id,
                product_name=product.name,
                available=product.stock,
                requested=quantity,
            )

        product.stock = product.stock - quantity
        self.repository.add(product)
        return product
