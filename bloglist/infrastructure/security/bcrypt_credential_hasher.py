# External package imports
import bcrypt

# Local application imports
from ...domain.exceptions import ValidationError
from ...domain.services.credential_hasher import CredentialHasher

# bcrypt only reads the first 72 bytes and current releases reject longer input
MAX_PASSWORD_BYTES = 72


class BcryptCredentialHasher(CredentialHasher):
    """bcrypt implementation of CredentialHasher"""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """
        Hash a plain password with a fresh salt

        Args:
            plaintext: The plain text password

        Returns:
            bcrypt hash as a string

        Raises:
            ValidationError: If the password is longer than 72 bytes in UTF-8
        """
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"password must be at most {MAX_PASSWORD_BYTES} bytes",
                fields=["password"],
            )
        hashed = bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """False for a wrong password, an over-long password or a malformed hash"""
        encoded = plaintext.encode("utf-8")
        if not hashed or len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except ValueError:
            return False
