# Standard library imports
from typing import Optional

# External package imports
from fastapi import Request

# Local application imports
from ...application.use_cases.auth.resolve_principal import ResolvePrincipalUseCase
from ...domain.exceptions import UnauthorizedError
from ...domain.models.principal import Principal
from ...di.container import get_container


def get_request_token(request: Request) -> Optional[str]:
    """Token stored by the token extraction middleware, if any"""
    return getattr(request.state, "token", None)


async def get_current_principal(request: Request) -> Principal:
    """
    FastAPI dependency resolving the authenticated principal.

    Second stage of the access-control chain; only routes that mutate
    blogs on behalf of a user depend on it. Raising here rejects the
    request before the route body (and so any repository write) runs.

    Args:
        request: Current request, carrying the extracted token

    Returns:
        Principal of the token's user

    Raises:
        UnauthorizedError: If the request carried no bearer token
        InvalidTokenError: If the token cannot be verified
    """
    token = get_request_token(request)
    if token is None:
        raise UnauthorizedError()

    container = get_container()
    resolve_principal_use_case = container.get(ResolvePrincipalUseCase)
    return await resolve_principal_use_case.execute(token)
