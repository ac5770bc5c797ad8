"""Plain-data projections of posts."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model.post import Post


class PostView(BaseModel):
    """Post as returned to callers."""

    post_id: str
    title: str
    content: str
    status: str
    author_id: str
    created_at: datetime
    published_at: datetime | None

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        return cls(
            post_id=str(post.id),
            title=post.title.value,
            content=post.content.value,
            status=post.status.value,
            author_id=str(post.author_id),
            created_at=post.created_at.value,
            published_at=post.published_at,
        )
