from abc import ABC, abstractmethod

from ..models.principal import Principal


class TokenCodec(ABC):
    """Signed token contract. A token carries exactly one principal."""

    @abstractmethod
    def sign(self, principal: Principal) -> str:
        """Issue a signed, expiring token for principal"""
        pass

    @abstractmethod
    def verify(self, token: str) -> Principal:
        """
        Decode and check a token.

        Raises:
            ValueError: If the token is malformed, tampered with, expired
                or lacks the user claims
        """
        pass
