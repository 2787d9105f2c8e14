"""
Deploy Service Forwarding
=========================

Sends a normalized payload to the local mint factory deploy service and hands
back whatever JSON it answers with.

Behaviour:
----------
1. One POST to {DEPLOY_SERVICE_URL}/deploy, no retries
2. Any completed exchange returns the parsed JSON body, whatever the status
3. The whole round trip runs under one deadline (REQUEST_TIMEOUT_SECONDS)
4. Connection errors, timeouts and non-JSON bodies become
   {"success": false, "error": "<message>"}
"""

import asyncio
import logging
from typing import Any, Dict

import httpx

from ..models import DeployPayload, ErrorResponse
from .strict_json import loads_strict

logger = logging.getLogger(__name__)

DEPLOY_PATH = "/deploy"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
DEFAULT_TIMEOUT_SECONDS = 90.0


def build_deploy_client(base_url: str, timeout_seconds: float) -> httpx.AsyncClient:
    """
    Create the pooled HTTP client used for every deploy call.

    Args:
        base_url: Deploy service base URL (e.g. http://localhost:7890)
        timeout_seconds: Per-phase httpx timeout (connect, read, write, pool)

    Returns:
        Configured httpx.AsyncClient; the caller owns closing it
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds),
    )


async def forward_deploy(
    client: httpx.AsyncClient,
    payload: DeployPayload,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> Any:
    """
    Forward a deploy payload and relay the response body unchanged.

    The whole exchange, from connecting to reading the last byte of the
    body, must finish within timeout_seconds.

    Args:
        client: HTTP client bound to the deploy service
        payload: Normalized collection payload
        timeout_seconds: Deadline for the complete round trip

    Returns:
        Parsed JSON from the deploy service, or an error body when the
        exchange could not be completed
    """
    body = payload.to_json()

    try:
        response = await asyncio.wait_for(
            client.post(
                DEPLOY_PATH,
                json=body,
                headers={"Content-Type": "application/json"},
            ),
            timeout=timeout_seconds,
        )
        result = loads_strict(response.content)

    except asyncio.TimeoutError:
        message = f"Deploy service did not respond within {timeout_seconds:g} seconds"
        logger.error(message, extra={"recipient": body.get("recipient")})
        return ErrorResponse(error=message).to_json()

    except httpx.TimeoutException as e:
        logger.error(
            f"Deploy service timeout: {e}",
            extra={"recipient": body.get("recipient")}
        )
        return _failure(e)

    except (httpx.HTTPError, ValueError) as e:
        # ValueError covers a body that is not valid JSON
        logger.error(
            f"Error creating collection: {e}",
            extra={
                "recipient": body.get("recipient"),
                "exception_type": type(e).__name__,
            }
        )
        return _failure(e)

    logger.info(
        "Deploy service responded",
        extra={
            "status_code": response.status_code,
            "recipient": body.get("recipient"),
        }
    )
    return result


def _failure(exc: Exception) -> Dict[str, Any]:
    return ErrorResponse(error=str(exc) or UNKNOWN_ERROR_MESSAGE).to_json()
