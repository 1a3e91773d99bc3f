"""Async client for the Steam Storefront API, with a small command line."""

__version__ = "0.1.0"

__all__ = ["app", "cli", "package", "price", "review", "steam", "types"]