from .bcrypt_credential_hasher import BcryptCredentialHasher
from .jwt_token_codec import JwtTokenCodec

__all__ = ["BcryptCredentialHasher", "JwtTokenCodec"]
