"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostData,
    PostItem,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostData",
    "PostItem",
]
