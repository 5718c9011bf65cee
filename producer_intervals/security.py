from __future__ import annotations

import hmac
import logging

from fastapi import HTTPException, Request

from .rules import API_KEY_HEADER

logger = logging.getLogger(__name__)


def require_api_key(request: Request) -> None:
    """
    Reject the request unless its x-api-key header matches the configured key.

    The comparison is exact: no trimming, no case folding. With several
    x-api-key headers only the first one counts. No configured key means
    authentication is off.
    """
    expected = request.app.state.settings.api_key
    if expected is None:
        return

    provided = request.headers.get(API_KEY_HEADER)
    if not provided or not hmac.compare_digest(provided.encode(), expected.encode()):
        logger.debug("Rejected request to %s", request.url.path)
        raise HTTPException(status_code=403, detail="Forbidden")
