# bloglist/routes/blog.py

"""
Blog Routes.

Provides the blog lifecycle endpoints with standardized documentation
aligned to established route patterns.

Summary
-------
Endpoints include:
  - List blogs
  - Get blog by id
  - Create blog
  - Update blog
  - Delete blog
  - Comment on a blog

Identity
--------
Every endpoint runs the optional identity dependency: a request without a
bearer token proceeds anonymously, a request with an invalid token is
rejected with `401`. Create, update and delete additionally require an
identity.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogServiceDep, IdentityDep, get_identity
from bloglist.schemas import BlogCreate, BlogResponse, BlogUpdate, CommentCreate

router = APIRouter(
    prefix="/api/blogs",
    tags=["📝 Blogs"],
    dependencies=[Depends(get_identity)],
)

BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "comments": [],
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "username": "mluukkai",
        "name": "Matti Luukkainen",
    },
}

INVALID_TOKEN_RESPONSE = {
    "description": "Invalid token",
    "content": {
        "application/json": {"example": {"detail": "token invalid", "kind": "invalid_token"}},
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Retrieve every blog with its owner populated.",
    responses={
        200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}},
        401: INVALID_TOKEN_RESPONSE,
    },
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogResponse]:
    """
    List all blogs.

    Parameters
    ----------
    service : BlogService
        Blog service dependency.

    Returns
    -------
    list[BlogResponse]
        Every blog with owner `{id, username, name}`.
    """
    return await service.list_all()


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a single blog by its UUID.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        401: INVALID_TOKEN_RESPONSE,
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, service: BlogServiceDep) -> BlogResponse:
    """Get a blog by ID."""
    return await service.get(blog_id)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user. `likes` defaults to 0.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Missing fields",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "missing or empty: title, url",
                        "kind": "validation_error",
                        "errors": [
                            {"field": "title", "message": "field is required"},
                            {"field": "url", "message": "field is required"},
                        ],
                    },
                },
            },
        },
        401: {
            "description": "No or invalid token",
            "content": {
                "application/json": {"example": {"detail": "token missing", "kind": "unauthorized"}},
            },
        },
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ],
    identity: IdentityDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog payload.
    identity : UserDB | None
        Resolved caller.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Created blog with owner populated.
    """
    return await service.create(identity, blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Replace a blog",
    description=(
        "Replace `title`, `author`, `url` and `likes`, optionally reassigning "
        "the owner with `user`. Requires a token; no ownership check is applied."
    ),
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Missing fields or unknown blog",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Blog with ID <uuid> does not exist",
                        "kind": "validation_error",
                    },
                },
            },
        },
        401: {
            "description": "No or invalid token",
            "content": {
                "application/json": {"example": {"detail": "token missing", "kind": "unauthorized"}},
            },
        },
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    blog: BlogUpdate,
    identity: IdentityDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """Replace a blog's fields."""
    return await service.update(identity, blog_id, blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a blog",
    description="Delete a blog owned by the authenticated user.",
    responses={
        204: {"description": "Blog deleted"},
        401: {
            "description": "No or invalid token",
            "content": {
                "application/json": {"example": {"detail": "token missing", "kind": "unauthorized"}},
            },
        },
        403: {
            "description": "Not the owner",
            "content": {
                "application/json": {"example": {"detail": "This is not your blog", "kind": "forbidden"}},
            },
        },
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    identity: IdentityDep,
    service: BlogServiceDep,
) -> Response:
    """
    Delete a blog.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    identity : UserDB | None
        Resolved caller.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    Response
        Empty `204` response.
    """
    await service.delete(identity, blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.post(
    "/{blog_id}/comments",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Comment on a blog",
    description="Append a comment to a blog. Anyone may comment.",
    responses={
        201: {"content": {"application/json": {"example": {**BLOG_EXAMPLE, "comments": ["Great read!"]}}}},
        401: INVALID_TOKEN_RESPONSE,
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_add_comment",
)
async def add_comment(
    blog_id: UUID,
    comment: CommentCreate,
    service: BlogServiceDep,
) -> BlogResponse:
    """Append a comment to a blog."""
    return await service.add_comment(blog_id, comment.comment)
