"""Domain services."""

from .author_service import AuthorService, IdentityClient
from .base import Service
from .comment_service import CommentService
from .comment_tree_service import CommentNode, CommentTreeService
from .jwt_service import JWTService
from .post_service import PostService
from .vote_service import VoteService

__all__ = [
    "Service",
    "AuthorService",
    "IdentityClient",
    "CommentService",
    "CommentNode",
    "CommentTreeService",
    "JWTService",
    "PostService",
    "VoteService",
]
