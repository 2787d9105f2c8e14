"""
Collection Request Normalization
================================

Maps the public create-collection body onto the field names the deploy
service expects.

Inbound key      -> Deploy payload key
---------------------------------------
baseURI          -> base_uri
collectionName   -> name
symbol           -> symbol        (absent or null -> "FCNFT")
price            -> price         (absent only    -> "0.00005 ether")
creatorAddress   -> recipient     (required)
maxMints         -> max_supply    (absent or null -> 0)

`hash` and `fid` are accepted but not forwarded. A null price is forwarded
as null; callers already depend on that.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..models import DeployPayload

DEFAULT_SYMBOL = "FCNFT"
DEFAULT_PRICE = "0.00005 ether"
DEFAULT_MAX_SUPPLY = 0

MISSING_CREATOR_MESSAGE = "Missing required parameter: creatorAddress"


@dataclass(frozen=True)
class NormalizeResult:
    """
    Outcome of normalizing a create-collection body.

    Exactly one of payload and error is set.
    """

    payload: Optional[DeployPayload] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_collection_request(body: Mapping[str, Any]) -> NormalizeResult:
    """
    Build the deploy payload from an inbound request body.

    Args:
        body: Parsed JSON body of POST /create-collection

    Returns:
        NormalizeResult with the payload, or with MISSING_CREATOR_MESSAGE
        when creatorAddress is absent, null, or otherwise falsy.
    """
    creator_address = body.get("creatorAddress")
    if not creator_address:
        return NormalizeResult(error=MISSING_CREATOR_MESSAGE)

    # Absent keys stay unset so they are left out of the outbound JSON
    fields = {}
    if "baseURI" in body:
        fields["base_uri"] = body["baseURI"]
    if "collectionName" in body:
        fields["name"] = body["collectionName"]

    fields.update(
        symbol=_default_if_null(body.get("symbol"), DEFAULT_SYMBOL),
        price=body["price"] if "price" in body else DEFAULT_PRICE,
        recipient=creator_address,
        max_supply=_default_if_null(body.get("maxMints"), DEFAULT_MAX_SUPPLY),
        manual_verify=False,
    )

    return NormalizeResult(payload=DeployPayload(**fields))


def _default_if_null(value: Any, default: Any) -> Any:
    return default if value is None else value
