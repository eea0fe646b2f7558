"""
Unit tests for the two-stage access control: bearer token extraction
(middleware) and principal resolution (route dependency), plus the
mapping of domain errors to HTTP status codes.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bloglist.api.error_handlers import status_code_for
from bloglist.api.middleware import extract_bearer_token
from bloglist.api.v1.dependencies import get_current_principal, get_request_token
from bloglist.domain.exceptions import (
    BlogListError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    PartialWriteError,
    StorageError,
    UnauthorizedError,
    ValidationError,
)
from bloglist.domain.models.principal import Principal


class TestExtractBearerToken:
    """Tests for extract_bearer_token"""

    def test_lowercase_prefix(self):
        assert extract_bearer_token("bearer abc.def.ghi") == "abc.def.ghi"

    def test_remainder_is_not_trimmed(self):
        assert extract_bearer_token("bearer  abc") == " abc"

    @pytest.mark.parametrize("header", [None, "", "Bearer abc", "BEARER abc", "bearerabc", "bearer ", "Basic abc"])
    def test_no_token(self, header):
        assert extract_bearer_token(header) is None


def _request(token):
    return SimpleNamespace(state=SimpleNamespace(token=token))


class TestGetCurrentPrincipal:
    """Tests for the get_current_principal dependency"""

    def test_request_without_extraction_has_no_token(self):
        assert get_request_token(SimpleNamespace(state=SimpleNamespace())) is None

    @pytest.mark.asyncio
    async def test_missing_token_raises_unauthorized(self):
        with patch("bloglist.api.v1.dependencies.get_container") as mock_get_container:
            with pytest.raises(UnauthorizedError) as exc_info:
                await get_current_principal(_request(None))
        assert exc_info.value.user_message == "token missing"
        mock_get_container.assert_not_called()

    @pytest.mark.asyncio
    async def test_valid_token_resolves_principal(self):
        resolve = AsyncMock()
        resolve.execute.return_value = Principal(user_id="usr-1", username="mluukkai")
        container = MagicMock()
        container.get.return_value = resolve

        with patch("bloglist.api.v1.dependencies.get_container", return_value=container):
            principal = await get_current_principal(_request("token-value"))

        assert principal == Principal(user_id="usr-1", username="mluukkai")
        resolve.execute.assert_called_once_with("token-value")

    @pytest.mark.asyncio
    async def test_invalid_token_propagates(self):
        resolve = AsyncMock()
        resolve.execute.side_effect = InvalidTokenError("token invalid")
        container = MagicMock()
        container.get.return_value = resolve

        with patch("bloglist.api.v1.dependencies.get_container", return_value=container):
            with pytest.raises(InvalidTokenError):
                await get_current_principal(_request("forged"))


class TestStatusCodes:
    """Tests for status_code_for"""

    @pytest.mark.parametrize(
        "exception, expected",
        [
            (ValidationError("title and url required", fields=["title", "url"]), 400),
            (InvalidCredentialsError(), 401),
            (UnauthorizedError(), 401),
            (InvalidTokenError("token invalid"), 401),
            (ForbiddenError("not yours"), 403),
            (NotFoundError("Blog", "b1"), 404),
            (PartialWriteError("half done", blog_id="b1"), 500),
            (StorageError("down"), 503),
            (BlogListError("unexpected"), 500),
        ],
    )
    def test_mapping(self, exception, expected):
        assert status_code_for(exception) == expected
