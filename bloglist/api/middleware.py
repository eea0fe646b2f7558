"""
HTTP middleware.

Token extraction is the first stage of the access-control chain: it only
records the bearer token (or None) on request.state and never rejects a
request. Routes that need a principal resolve it in
api.v1.dependencies.get_current_principal.
"""
# Standard library imports
import logging
import time
from typing import Awaitable, Callable, Optional

# External package imports
from fastapi import Request, Response

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "  # case-sensitive, exactly one space


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the token from an Authorization header value

    Args:
        authorization: Raw header value, or None when absent

    Returns:
        The remainder after "bearer ", or None if the header is missing,
        uses another prefix (including "Bearer "), or has nothing after it
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):]
    return token or None


async def token_extractor(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request.state.token = extract_bearer_token(request.headers.get("authorization"))
    return await call_next(request)


async def request_logger(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s"
    )
    return response
