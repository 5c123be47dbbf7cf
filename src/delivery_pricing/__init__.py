"""Delivery zone resolution and surge pricing for the storefront checkout."""

__version__ = "0.1.0"
