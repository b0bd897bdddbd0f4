"""OpenAI adapter holding the process-wide chat-completion client.
"""

from typing import Optional
import logging
from openai import OpenAI

from app.exceptions import ModelUnavailable

logger = logging.getLogger("pantrychef.openai")

_client: Optional[OpenAI] = None


def connect(api_key: str, timeout: float = 60.0) -> OpenAI:
    """Create the shared client.

    The SDK's built-in retries are switched off: one failed call ends the request.
    """
    global _client
    _client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)
    logger.info("OpenAI client initialized (timeout: %.1fs)", timeout)
    return _client


def close():
    """Close the OpenAI client and release its connections."""
    global _client
    try:
        if _client is not None:
            _client.close()
            logger.info("OpenAI client closed")
    finally:
        _client = None


def get_client() -> OpenAI:
    """Return the shared client.

    Raises:
        ModelUnavailable: connect() has not been called
    """
    if _client is None:
        raise ModelUnavailable("OpenAI client is not initialized")
    return _client
