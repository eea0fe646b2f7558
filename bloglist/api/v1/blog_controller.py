# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.blog_dto import BlogCreateRequest, BlogUpdateRequest, BlogResponse
from ...application.dto.statistics_dto import BlogStatisticsResponse
from ...application.use_cases.blog.list_blogs import ListBlogsUseCase
from ...application.use_cases.blog.create_blog import CreateBlogUseCase
from ...application.use_cases.blog.delete_blog import DeleteBlogUseCase
from ...application.use_cases.blog.update_blog import UpdateBlogUseCase
from ...application.use_cases.blog.get_blog_statistics import GetBlogStatisticsUseCase
from ...domain.models.principal import Principal
from ...di.container import get_container
from .dependencies import get_current_principal


router = APIRouter(tags=["blogs"])


@router.get("", response_model=List[BlogResponse])
async def list_blogs() -> List[BlogResponse]:
    """
    List all blogs

    Returns:
        List of BlogResponse objects with owner username and name
    """
    container = get_container()
    list_blogs_use_case = container.get(ListBlogsUseCase)

    return await list_blogs_use_case.execute()


@router.get("/statistics", response_model=BlogStatisticsResponse)
async def get_blog_statistics() -> BlogStatisticsResponse:
    """Total likes, favorite blog, most prolific and most liked author"""
    container = get_container()
    statistics_use_case = container.get(GetBlogStatisticsUseCase)

    return await statistics_use_case.execute()


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: BlogCreateRequest,
    principal: Principal = Depends(get_current_principal),
) -> BlogResponse:
    """
    Create a new blog owned by the current user

    Args:
        request: Blog creation request
        principal: Current authenticated principal (from dependency)

    Returns:
        BlogResponse with created blog information
    """
    container = get_container()
    create_blog_use_case = container.get(CreateBlogUseCase)

    return await create_blog_use_case.execute(principal=principal, request=request)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(blog_id: str, request: BlogUpdateRequest) -> BlogResponse:
    """
    Update a blog's title, author, url and likes

    No authentication is required here, unlike create and delete.

    Args:
        blog_id: ID of the blog
        request: Fields to replace

    Returns:
        BlogResponse with the updated blog
    """
    container = get_container()
    update_blog_use_case = container.get(UpdateBlogUseCase)

    return await update_blog_use_case.execute(blog_id=blog_id, request=request)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    principal: Principal = Depends(get_current_principal),
) -> Response:
    """
    Delete a blog owned by the current user

    Args:
        blog_id: ID of the blog
        principal: Current authenticated principal (from dependency)
    """
    container = get_container()
    delete_blog_use_case = container.get(DeleteBlogUseCase)

    await delete_blog_use_case.execute(principal=principal, blog_id=blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
