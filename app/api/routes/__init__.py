"""Endpoint routers mounted under the API prefix."""
