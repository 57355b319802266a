"""
                    Orders API

Order management backend for a restaurant-style ordering system:
customers, menu items and orders with a status lifecycle, served by
FastAPI over an async SQLAlchemy database.
"""

__version__ = "1.0.0"
