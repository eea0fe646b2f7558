# Standard library imports
from datetime import datetime, timedelta, timezone

# External package imports
import jwt

# Local application imports
from ...domain.constants import TokenClaims
from ...domain.models.principal import Principal
from ...domain.services.token_codec import TokenCodec


class JwtTokenCodec(TokenCodec):
    """
    PyJWT implementation of TokenCodec.

    Tokens are HMAC signed and carry the user id in ``sub``, the username,
    and ``iat``/``exp``. There is no revocation list; a token stays valid
    until it expires.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def sign(self, principal: Principal) -> str:
        issued_at = datetime.now(timezone.utc)
        claims = {
            TokenClaims.SUBJECT: principal.user_id,
            TokenClaims.USERNAME: principal.username,
            TokenClaims.ISSUED_AT: issued_at,
            TokenClaims.EXPIRES_AT: issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Principal:
        """
        Decode a token back into its principal

        Raises:
            ValueError: If the token is malformed, tampered with, expired,
                has no expiry, or lacks the user claims
        """
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": [TokenClaims.EXPIRES_AT]},
            )
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

        user_id = claims.get(TokenClaims.SUBJECT)
        username = claims.get(TokenClaims.USERNAME)
        if not user_id or not username:
            raise ValueError("missing user claims")

        return Principal(user_id=str(user_id), username=str(username))
