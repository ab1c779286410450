"""
Product Catalog API

CRUD endpoints for products and application users over SQLAlchemy, plus
a server-side HTTP session key/value store. The FastAPI application lives
in ``product_api.main``.
"""

__version__ = "1.0.0"
