"""Storefront FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from storefront.api import create_app
from storefront.domain import storefront

storefront.init()

app = create_app(storefront)
