"""GET|POST /api/v1/gasfire/verify — signed mint eligibility from transaction history."""

from __future__ import annotations

import logging

from eth_utils import is_address
from fastapi import APIRouter, Depends, HTTPException, Query

from gasfire.client.etherscan import EtherscanError, get_token_activity
from gasfire.config import Settings
from gasfire.dependencies import get_settings
from gasfire.models.responses import VerifyResponse
from gasfire.utils.signature import create_signature

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/gasfire")


@router.api_route("/verify", methods=["GET", "POST"], response_model=VerifyResponse)
def verify(
    address: str = Query(..., description="Account address to check"),
    settings: Settings = Depends(get_settings),
) -> VerifyResponse:
    if not is_address(address):
        raise HTTPException(status_code=400, detail=f"invalid address: {address!r}")
    if not settings.etherscan_api_key:
        raise HTTPException(status_code=503, detail="ETHERSCAN_API_KEY is not configured")
    if not settings.signer_private_key:
        raise HTTPException(status_code=503, detail="SIGNER_PRIVATE_KEY is not configured")

    try:
        activity = get_token_activity(
            address,
            network=settings.etherscan_network,
            api_key=settings.etherscan_api_key,
            timeout=settings.etherscan_timeout,
        )
    except EtherscanError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    eligible = activity.gas_used > 0
    counter = str(activity.gas_used)
    logger.info("Credential check for %s: eligible=%s counter=%s", address, eligible, counter)

    try:
        signature = create_signature(settings.signer_private_key, address, eligible, counter)
    except ValueError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    logger.debug("Signature for %s: %s", address, signature)

    return VerifyResponse(mint_eligibility=eligible, data=counter, signature=signature)
