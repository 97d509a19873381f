"""
Client module for the Chargily Pay API.

Provides the async HTTP client covering balance, customers, products,
prices, checkouts and payment links.
"""

from .http_client import ChargilyClient

__all__ = ["ChargilyClient"]
