"""Plain-data projections of comments."""

from pydantic import BaseModel

from blog.domain.model.comment import Comment


class CommentView(BaseModel):
    """Comment as returned to callers.

    created_at uses the 'YYYY-MM-DD HH:MM:SS' form.
    """

    id: str
    content: str
    post_id: str
    author_id: str
    created_at: str

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            content=comment.content.value,
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            created_at=comment.created_at.to_string(),
        )
