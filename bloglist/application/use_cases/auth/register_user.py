# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.credential_hasher import CredentialHasher
from ....domain.models.user import User
from ....domain.exceptions import ValidationError
from ...dto.user_dto import UserRegistrationRequest, UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, credential_hasher: CredentialHasher) -> None:
        self.user_repository = user_repository
        self.credential_hasher = credential_hasher

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If the username is already taken
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            raise ValidationError("username must be unique", fields=["username"])

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            name=request.name,
            password_hash=self.credential_hasher.hash(request.password),
        )

        saved_user = await self.user_repository.insert(new_user)
        logger.info("Registered user %s (%s)", saved_user.username, saved_user.id)

        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            name=saved_user.name,
            blog_ids=list(saved_user.blog_ids),
        )
