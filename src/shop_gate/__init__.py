"""Request-validation shim for a Shopify embedded app."""

__version__ = "0.1.0"
