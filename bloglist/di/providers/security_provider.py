from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.services.credential_hasher import CredentialHasher
from ...domain.services.token_codec import TokenCodec
from ...infrastructure.security import BcryptCredentialHasher, JwtTokenCodec

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher and token codec, configured from settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        container.register_singleton(
            CredentialHasher,
            BcryptCredentialHasher(rounds=settings.bcrypt_rounds)
        )

        container.register_singleton(
            TokenCodec,
            JwtTokenCodec(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.access_token_expire_minutes,
            )
        )
