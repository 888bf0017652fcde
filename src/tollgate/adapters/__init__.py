"""Adapters – Redis state store and ASGI middleware."""
