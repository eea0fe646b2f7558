# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.credential_hasher import CredentialHasher
from ....domain.services.token_codec import TokenCodec
from ....domain.models.principal import Principal
from ....domain.exceptions import InvalidCredentialsError
from ...dto.auth_dto import UserLoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating a signed token"""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_hasher: CredentialHasher,
        token_codec: TokenCodec,
    ) -> None:
        self.user_repository = user_repository
        self.credential_hasher = credential_hasher
        self.token_codec = token_codec

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username and password

        Returns:
            TokenResponse with the signed token

        Raises:
            InvalidCredentialsError: Unknown username or wrong password. Both
                cases raise the same error so callers cannot tell them apart.
        """
        user = await self.user_repository.find_by_username(request.username)
        if user is None or not self.credential_hasher.verify(request.password, user.password_hash):
            logger.info("Failed login attempt for username %r", request.username)
            raise InvalidCredentialsError()

        token = self.token_codec.sign(Principal(user_id=user.id or "", username=user.username))

        return TokenResponse(access_token=token, username=user.username, name=user.name)
