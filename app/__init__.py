# app/__init__.py
"""
Product Catalog API package.

Run the service with:
    uvicorn app:app --reload
or, once installed:
    product-api
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
