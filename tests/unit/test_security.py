"""
Unit tests for the bcrypt hasher and the JWT token codec
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import jwt
import pytest
from bloglist.di.base_container import BaseContainer
from bloglist.di.providers import SecurityProvider
from bloglist.domain.exceptions import ValidationError
from bloglist.domain.models.principal import Principal
from bloglist.domain.services.credential_hasher import CredentialHasher
from bloglist.domain.services.token_codec import TokenCodec
from bloglist.infrastructure.security import BcryptCredentialHasher, JwtTokenCodec


class TestBcryptCredentialHasher:
    """Tests for BcryptCredentialHasher"""

    def test_returns_non_empty_string(self, hasher):
        result = hasher.hash("mypassword")
        assert isinstance(result, str)
        assert result != "mypassword"

    def test_different_salts_per_call(self, hasher):
        """Each hash should use a new salt, so hashes differ."""
        assert hasher.hash("same") != hasher.hash("same")

    def test_uses_configured_rounds(self, hasher):
        assert hasher.hash("salainen").startswith("$2b$04$")

    def test_matching_and_wrong_password(self, hasher):
        hashed = hasher.hash("correct")
        assert hasher.verify("correct", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    def test_malformed_hash_returns_false(self, hasher):
        assert hasher.verify("anything", "not-a-bcrypt-hash") is False
        assert hasher.verify("anything", "") is False

    def test_password_over_72_bytes_is_rejected(self, hasher):
        with pytest.raises(ValidationError) as exc_info:
            hasher.hash("x" * 73)
        assert exc_info.value.fields == ["password"]

    def test_limit_counts_utf8_bytes(self, hasher):
        # 36 two-byte characters fit, 37 do not
        assert hasher.verify("ä" * 36, hasher.hash("ä" * 36)) is True
        with pytest.raises(ValidationError):
            hasher.hash("ä" * 37)

    def test_verify_over_long_password_is_false(self, hasher):
        hashed = hasher.hash("x" * 72)
        assert hasher.verify("x" * 100, hashed) is False


class TestJwtTokenCodec:
    """Tests for JwtTokenCodec"""

    def test_sign_then_verify(self, token_codec):
        principal = Principal(user_id="user-123", username="mluukkai")
        assert token_codec.verify(token_codec.sign(principal)) == principal

    def test_token_carries_expected_claims(self, token_codec, mock_settings):
        token = token_codec.sign(Principal(user_id="user-123", username="mluukkai"))
        claims = jwt.decode(token, mock_settings.jwt_secret_key, algorithms=["HS256"])
        assert claims["sub"] == "user-123"
        assert claims["username"] == "mluukkai"
        assert claims["exp"] - claims["iat"] == 1440 * 60

    def test_invalid_token_raises(self, token_codec):
        with pytest.raises(ValueError, match="Invalid token"):
            token_codec.verify("invalid.jwt.token")

    def test_tampered_token_raises(self, token_codec):
        token = token_codec.sign(Principal(user_id="user-1", username="root"))
        header, payload, signature = token.split(".")
        with pytest.raises(ValueError):
            token_codec.verify(".".join([header, payload, signature[::-1]]))

    def test_expired_token_raises(self, token_codec, mock_settings):
        expired = jwt.encode(
            {"sub": "user-1", "username": "root", "exp": datetime.now(timezone.utc) - timedelta(seconds=10)},
            mock_settings.jwt_secret_key,
            algorithm="HS256",
        )
        with pytest.raises(ValueError, match="Invalid token"):
            token_codec.verify(expired)

    def test_token_without_expiry_raises(self, token_codec, mock_settings):
        eternal = jwt.encode({"sub": "user-1", "username": "root"}, mock_settings.jwt_secret_key, algorithm="HS256")
        with pytest.raises(ValueError):
            token_codec.verify(eternal)

    def test_token_signed_with_other_secret_raises(self, token_codec):
        foreign = JwtTokenCodec(secret_key="some-other-secret").sign(Principal(user_id="user-1", username="root"))
        with pytest.raises(ValueError):
            token_codec.verify(foreign)

    def test_missing_username_claim_raises(self, token_codec, mock_settings):
        token = jwt.encode(
            {"sub": "user-1", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            mock_settings.jwt_secret_key,
            algorithm="HS256",
        )
        with pytest.raises(ValueError, match="missing user claims"):
            token_codec.verify(token)


class TestSecurityProvider:
    def test_configures_adapters_from_settings(self, mock_settings):
        container = BaseContainer()
        with patch("bloglist.di.providers.security_provider.get_settings", return_value=mock_settings):
            SecurityProvider.register(container)

        hasher = container.get(CredentialHasher)
        codec = container.get(TokenCodec)
        assert isinstance(hasher, BcryptCredentialHasher)
        assert hasher.rounds == 4
        assert isinstance(codec, JwtTokenCodec)
        assert codec.secret_key == "test_jwt_secret"
        assert codec.expire_minutes == 1440
