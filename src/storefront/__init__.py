"""Storefront bounded context: users, products and transactional order placement."""
