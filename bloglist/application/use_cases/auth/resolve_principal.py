# Local application imports
from ....domain.services.token_codec import TokenCodec
from ....domain.exceptions import InvalidTokenError
from ....domain.models.principal import Principal


class ResolvePrincipalUseCase:
    """Use case for turning a bearer token into the request's principal"""

    def __init__(self, token_codec: TokenCodec) -> None:
        self.token_codec = token_codec

    async def execute(self, token: str) -> Principal:
        """
        Resolve principal from a token

        The principal is trusted as of token issuance; the user is not
        re-read from storage.

        Args:
            token: Access token taken from the Authorization header

        Returns:
            Principal with user id and username

        Raises:
            InvalidTokenError: If the token is malformed, tampered with,
                expired, or lacks the expected claims
        """
        try:
            return self.token_codec.verify(token)
        except ValueError as exception:
            raise InvalidTokenError(f"token invalid: {str(exception)}")
