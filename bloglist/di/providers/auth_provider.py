from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.credential_hasher import CredentialHasher
from ...domain.services.token_codec import TokenCodec
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.resolve_principal import ResolvePrincipalUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                credential_hasher=container.get(CredentialHasher),
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                credential_hasher=container.get(CredentialHasher),
                token_codec=container.get(TokenCodec),
            )
        )

        container.register_factory(
            ResolvePrincipalUseCase,
            lambda: ResolvePrincipalUseCase(
                token_codec=container.get(TokenCodec)
            )
        )
