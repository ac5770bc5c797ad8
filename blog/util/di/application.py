"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.post import (
    ArchivePostUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PublishPostUseCase,
    UpdatePostContentUseCase,
)
from blog.application.usecase.tag import (
    CreateTagUseCase,
    GetTagBySlugUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
)
from blog.application.usecase.translation import GetTranslationsUseCase
from blog.application.usecase.user import (
    ChangePasswordUseCase,
    ListUsersUseCase,
    PromoteUserUseCase,
    RegisterUserUseCase,
)
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from blog.domain.service import PasswordHasher, TokenService, TranslationLoader
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_repository=user_repository,
            password_hasher=password_hasher,
            token_service=token_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, token_service: TokenService, user_repository: UserRepository
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            token_service=token_service, user_repository=user_repository
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_repository=user_repository, password_hasher=password_hasher
        )

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(
            user_repository=user_repository, password_hasher=password_hasher
        )

    @provide(scope=Scope.REQUEST)
    def get_promote_user_use_case(
        self, user_repository: UserRepository
    ) -> PromoteUserUseCase:
        """Provide promote user use case."""
        return PromoteUserUseCase(user_repository=user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, user_repository: UserRepository
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_repository=user_repository)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_repository: PostRepository
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_repository: PostRepository) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_repository: PostRepository
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_post_content_use_case(
        self, post_repository: PostRepository
    ) -> UpdatePostContentUseCase:
        """Provide update post content use case."""
        return UpdatePostContentUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_publish_post_use_case(
        self, post_repository: PostRepository
    ) -> PublishPostUseCase:
        """Provide publish post use case."""
        return PublishPostUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_archive_post_use_case(
        self, post_repository: PostRepository
    ) -> ArchivePostUseCase:
        """Provide archive post use case."""
        return ArchivePostUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_repository=post_repository, comment_repository=comment_repository
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_repository: CommentRepository
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_repository=comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_repository: CommentRepository
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_repository=comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_repository: CommentRepository
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_repository=comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_repository: CommentRepository
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_repository=comment_repository)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(self, tag_repository: TagRepository) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_repository=tag_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_tag_use_case(self, tag_repository: TagRepository) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(tag_repository=tag_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_repository: TagRepository) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_repository=tag_repository)

    @provide(scope=Scope.REQUEST)
    def get_tag_by_slug_use_case(
        self, tag_repository: TagRepository
    ) -> GetTagBySlugUseCase:
        """Provide get tag by slug use case."""
        return GetTagBySlugUseCase(tag_repository=tag_repository)

    # Translation use cases
    @provide(scope=Scope.REQUEST)
    def get_translations_use_case(
        self, translation_loader: TranslationLoader
    ) -> GetTranslationsUseCase:
        """Provide get translations use case."""
        return GetTranslationsUseCase(translation_loader=translation_loader)
