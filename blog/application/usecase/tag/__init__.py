"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .get_tag import GetTagBySlugRequest, GetTagBySlugUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .update_tag import UpdateTagRequest, UpdateTagUseCase
from .views import TagView

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "GetTagBySlugRequest",
    "GetTagBySlugUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagView",
    "UpdateTagRequest",
    "UpdateTagUseCase",
]
