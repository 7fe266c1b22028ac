"""
HTTP access to the storefront API services
"""

from .api_client import StorefrontApiClient

__all__ = ["StorefrontApiClient"]
