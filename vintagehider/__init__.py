"""Unpublish sold out vintage products from a store catalog."""

__version__ = '1.0.0'
