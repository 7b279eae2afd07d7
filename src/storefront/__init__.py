"""Storefront client: local cart, checkout flow and API client."""
