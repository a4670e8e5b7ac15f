"""Storefront HTTP API package."""

from storefront.api.app import create_app
from storefront.api.routes import order_router

__all__ = ["create_app", "order_router"]
