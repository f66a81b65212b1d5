"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .create_reply import CreateReplyRequest, CreateReplyResponse, CreateReplyUseCase
from .get_comments import (
    CommentData,
    CommentItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)

__all__ = [
    "CommentData",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyResponse",
    "CreateReplyUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
