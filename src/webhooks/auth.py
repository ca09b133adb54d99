import hashlib
import hmac
import logging

from fastapi import HTTPException, Request

from src.core.config import config

logger = logging.getLogger(__name__)


def compute_signature(secret: str, payload: bytes) -> str:
    """Return the ``sha256=...`` signature GitHub sends for a payload."""
    mac = hmac.new(secret.encode(), msg=payload, digestmod=hashlib.sha256)
    return f"sha256={mac.hexdigest()}"


async def verify_github_signature(request: Request) -> bool:
    """
    FastAPI dependency that verifies the GitHub webhook signature.

    This function reads the 'X-Hub-Signature-256' header and compares it
    with a hash of the raw request body, using our configured webhook secret.

    Raises:
        HTTPException: If the signature is missing or invalid.

    Returns:
        True if the signature is valid.
    """
    signature = request.headers.get("X-Hub-Signature-256")
    if not signature:
        logger.warning("Received a request without the X-Hub-Signature-256 header.")
        raise HTTPException(status_code=401, detail="Missing GitHub webhook signature.")

    payload = await request.body()
    expected_signature = compute_signature(config.github.webhook_secret, payload)

    if not hmac.compare_digest(signature, expected_signature):
        logger.error("Invalid webhook signature.")
        raise HTTPException(status_code=401, detail="Invalid GitHub webhook signature.")

    logger.debug("GitHub webhook signature verified successfully.")
    return True
