"""
Proxy Routes - Collection Creation Relay
========================================

This module implements the API-key protected endpoint that relays collection
creation requests to the local mint factory deploy service.

Request Flow:
-------------
1. x-api-key header is checked against API_KEY (401 on mismatch)
2. JSON body is normalized into the deploy payload
3. Payload is POSTed once to the deploy service
4. Deploy service JSON is returned to the caller unchanged

Endpoints:
----------
- POST /create-collection: Relay a collection creation request
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse
import httpx

from ..auth import API_KEY_HEADER, verify_api_key
from ..config import Settings
from ..models import ErrorResponse
from .forward import forward_deploy
from .normalize import normalize_collection_request
from .strict_json import loads_strict

logger = logging.getLogger(__name__)

# Create router
proxy_router = APIRouter()


# ============================================================================
# Helpers
# ============================================================================

def get_app_settings(request: Request) -> Settings:
    """Settings handed to create_app() at process start."""
    return request.app.state.settings


def get_deploy_client(request: Request) -> httpx.AsyncClient:
    """
    Get deploy service HTTP client from app state.

    Args:
        request: FastAPI request object

    Returns:
        Configured httpx.AsyncClient for deploy service communication

    Raises:
        HTTPException: 503 if the lifespan has not created the client
    """
    client = getattr(request.app.state, "deploy_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Deploy service client not available"
        )

    return client


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Invalid JSON (including NaN or Infinity literals), an empty body, or a
    non-object value all yield an empty dict, which then fails the
    creatorAddress check.
    """
    try:
        body = loads_strict(await request.body())
    except ValueError:
        logger.warning("Request body is not valid JSON")
        return {}

    if not isinstance(body, dict):
        logger.warning(
            "Request body is not a JSON object",
            extra={"body_type": type(body).__name__}
        )
        return {}

    return body


# ============================================================================
# Proxy Endpoints
# ============================================================================

@proxy_router.post("/create-collection")
async def create_collection(
    request: Request,
    x_api_key: Optional[str] = Header(None, alias=API_KEY_HEADER),
):
    """
    Relay a collection creation request to the deploy service.

    Returns:
        Deploy service JSON body (unchanged), or a
        {"success": false, "error": ...} body on failure
    """
    settings = get_app_settings(request)

    auth = verify_api_key(x_api_key, settings.API_KEY)
    if not auth.ok:
        logger.warning(
            "Collection request rejected: invalid or missing API key",
            extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=ErrorResponse(
                error=auth.error,
                code=status.HTTP_401_UNAUTHORIZED,
            ).to_json()
        )

    body = await read_json_object(request)

    normalized = normalize_collection_request(body)
    if not normalized.ok:
        logger.info(
            "Collection request rejected: validation failed",
            extra={"reason": normalized.error}
        )
        return JSONResponse(content=ErrorResponse(error=normalized.error).to_json())

    logger.info(
        "Relaying collection request to deploy service",
        extra={
            "recipient": normalized.payload.recipient,
            "symbol": normalized.payload.symbol,
        }
    )

    deploy_client = get_deploy_client(request)
    result = await forward_deploy(
        deploy_client,
        normalized.payload,
        timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS,
    )

    return JSONResponse(content=result)
