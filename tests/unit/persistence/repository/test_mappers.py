"""Unit tests for row/model mappers."""

from uuid import uuid4

from forum.domain.model import CommentComment, PostComment
from forum.domain.value import CommentType, UserId, VotableType, VoteDirection
from forum.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_vote,
)
from tests.factories import at, make_comment, make_reply


class TestCommentMapping:
    """Comment rows map to the variant their parent implies."""

    def test_row_without_parent_is_post_comment(self):
        row = {
            "id": str(uuid4()),
            "post_id": str(uuid4()),
            "parent_id": None,
            "author_id": "user_a",
            "content": "top",
            "created_at": at(0),
            "comment_type": "post",
        }

        comment = row_to_comment(row)

        assert isinstance(comment, PostComment)
        assert comment.comment_type == CommentType.POST

    def test_row_with_parent_is_reply(self):
        parent_id = uuid4()
        row = {
            "id": uuid4(),
            "post_id": uuid4(),
            "parent_id": parent_id,
            "author_id": "user_a",
            "content": "reply",
            "created_at": at(1),
            "comment_type": "comment",
        }

        comment = row_to_comment(row)

        assert isinstance(comment, CommentComment)
        assert comment.parent_id == parent_id

    def test_comment_to_dict_stores_plain_type(self):
        top = make_comment(uuid4(), UserId("user_a"))
        reply = make_reply(top, UserId("user_b"))

        assert comment_to_dict(top)["comment_type"] == "post"
        assert comment_to_dict(top)["parent_id"] is None
        assert comment_to_dict(reply)["comment_type"] == "comment"
        assert comment_to_dict(reply)["parent_id"] == top.id


class TestVoteMapping:
    def test_row_to_vote(self):
        votable_id = uuid4()
        vote = row_to_vote(
            {
                "id": str(uuid4()),
                "user_id": "user_a",
                "votable_type": "comment",
                "votable_id": str(votable_id),
                "direction": "down",
                "created_at": at(0),
            }
        )

        assert vote.votable_type == VotableType.COMMENT
        assert vote.votable_id == votable_id
        assert vote.direction == VoteDirection.DOWN
