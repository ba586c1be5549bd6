"""
Static API key check for the mutating product routes.

The check is disabled unless ``REQUIRE_API_KEY`` is set, in which case
clients must send the configured ``API_KEY`` in the ``X-API-Key``
header.
"""

import hmac
import logging
from typing import Optional

from fastapi import Header

from .config import settings
from .errors import UnauthorizedError

logger = logging.getLogger(__name__)


async def require_api_key(x_api_key: Optional[str] = Header(default=None, alias="X-API-Key")) -> None:
    if not settings.require_api_key:
        return

    candidate = (x_api_key or "").strip()
    expected = settings.api_key
    ok = bool(candidate) and bool(expected) and hmac.compare_digest(candidate, expected)
    if not ok:
        logger.info("Rejected request with %s API key", "a wrong" if candidate else "no")
        raise UnauthorizedError("Unauthorized: Invalid or missing API key")
