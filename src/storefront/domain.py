"""Storefront bounded context: Users, Products and Order placement.

Handles the atomic order-placement workflow: stock reservation, per-item
discount pricing, balance debit and all-or-nothing persistence.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
