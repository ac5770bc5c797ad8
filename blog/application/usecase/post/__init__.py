"""Post use cases."""

from .archive_post import ArchivePostRequest, ArchivePostUseCase
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .publish_post import PublishPostRequest, PublishPostUseCase
from .update_post_content import UpdatePostContentRequest, UpdatePostContentUseCase
from .views import PostView

__all__ = [
    "ArchivePostRequest",
    "ArchivePostUseCase",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostView",
    "PublishPostRequest",
    "PublishPostUseCase",
    "UpdatePostContentRequest",
    "UpdatePostContentUseCase",
]
