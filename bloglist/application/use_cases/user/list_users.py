# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class ListUsersUseCase:
    """Use case for listing all users with the ids of the blogs they own"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        users = await self.user_repository.list_all()

        return [
            UserResponse(
                id=user.id or "",
                username=user.username,
                name=user.name,
                blog_ids=list(user.blog_ids),
            )
            for user in users
        ]
