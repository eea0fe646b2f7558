from .login_user import LoginUserUseCase
from .resolve_principal import ResolvePrincipalUseCase
from .register_user import RegisterUserUseCase

__all__ = ["LoginUserUseCase", "ResolvePrincipalUseCase", "RegisterUserUseCase"]
