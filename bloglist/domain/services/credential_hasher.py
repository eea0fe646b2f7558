from abc import ABC, abstractmethod


class CredentialHasher(ABC):
    """One-way password hashing contract"""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext credential

        Raises:
            ValidationError: If the credential cannot be hashed as given
        """
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext credential against a stored hash"""
        pass
