"""
Real HTTP clients.

Used by the storefront to reach the API service over HTTP.
"""
