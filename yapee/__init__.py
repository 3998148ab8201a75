"""
Yapee storefront: mock catalogue API service and client-side state store.
"""

__version__ = "1.0.0"
