"""
Data Models Module

This module defines Pydantic models for the payloads the relay produces.

Models are organized by functional area:
- Deploy service models (the normalized payload sent to /deploy)
- Relay response models (health and error bodies)

The inbound collection request is deliberately not a model: it is read as a
raw JSON mapping so that an absent key and an explicit null stay distinct.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Deploy Service Models
# ============================================================================

class DeployPayload(BaseModel):
    """
    Body POSTed to the deploy service.

    Fields that were absent from the inbound request are left unset and
    dropped by to_json(); fields the caller sent as null are kept as null.
    """
    base_uri: Any = Field(None, description="Metadata base URI")
    name: Any = Field(None, description="Collection display name")
    symbol: Any = Field(..., description="Token symbol")
    price: Any = Field(..., description="Mint price expression")
    recipient: Any = Field(..., description="Address receiving the collection")
    max_supply: Any = Field(..., description="Supply cap, 0 for unlimited")
    manual_verify: bool = Field(default=False, description="Always false")

    def to_json(self) -> dict:
        """Serialize for the wire, leaving out fields that were never set."""
        return self.model_dump(exclude_unset=True)


# ============================================================================
# Relay Response Models
# ============================================================================

class HealthResponse(BaseModel):
    """Liveness response."""
    status: str = Field(default="ok")


class ErrorResponse(BaseModel):
    """Failure body shared by every error path of the relay."""
    success: bool = Field(default=False)
    error: str = Field(..., description="Human-readable error message")
    code: Optional[int] = Field(None, description="HTTP status echoed in the body")

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)
