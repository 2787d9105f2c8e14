"""
Authentication Package

This package holds the shared-secret gate that protects the relay's
collection endpoint.

Modules:
- api_key: x-api-key header verification returning a typed result

The health check route is the only route that bypasses the gate.
"""

from .api_key import (
    API_KEY_HEADER,
    UNAUTHORIZED_MESSAGE,
    AuthResult,
    verify_api_key,
)

__all__ = [
    "API_KEY_HEADER",
    "UNAUTHORIZED_MESSAGE",
    "AuthResult",
    "verify_api_key",
]
