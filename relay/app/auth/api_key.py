"""
API Key Verification
====================

Compares the caller-supplied x-api-key header against the configured secret.

The gate never raises for a bad key. It returns an AuthResult and the route
decides how to answer, so an unauthorized request is rejected before the
request body is looked at or the deploy service is contacted.
"""

import secrets
from dataclasses import dataclass
from typing import Optional

API_KEY_HEADER = "x-api-key"
UNAUTHORIZED_MESSAGE = "Unauthorized: Invalid API key"


@dataclass(frozen=True)
class AuthResult:
    """
    Outcome of an API key check.

    Attributes:
        ok: True when the provided key matches the configured one
        error: Caller-facing message when ok is False
    """

    ok: bool
    error: Optional[str] = None

    @classmethod
    def allowed(cls) -> "AuthResult":
        return cls(ok=True)

    @classmethod
    def denied(cls) -> "AuthResult":
        return cls(ok=False, error=UNAUTHORIZED_MESSAGE)


def verify_api_key(provided: Optional[str], expected: Optional[str]) -> AuthResult:
    """
    Check a caller-supplied API key against the configured secret.

    A missing header, an unset secret, or any byte difference yields a
    denied result.

    Args:
        provided: Value of the x-api-key header, None if absent
        expected: Configured API_KEY, None if unset

    Returns:
        AuthResult.allowed() or AuthResult.denied()

    Example:
        >>> verify_api_key("s3cret", "s3cret").ok
        True
        >>> verify_api_key(None, "s3cret").error
        'Unauthorized: Invalid API key'
    """
    if not provided or expected is None:
        return AuthResult.denied()

    if not secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        return AuthResult.denied()

    return AuthResult.allowed()
