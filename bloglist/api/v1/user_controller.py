# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.user_dto import UserRegistrationRequest, UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    return await register_use_case.execute(request)


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """List all users with the ids of their blogs"""
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)

    return await list_users_use_case.execute()
