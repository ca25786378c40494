"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, CommentSettings
from blog.domain.repository import (
    CommentRepository,
    FollowRepository,
    ModerationLogRepository,
    PostRepository,
    UserRepository,
)
from blog.domain.service import (
    AuthenticationService,
    CommentService,
    FollowService,
    JWTService,
    ModerationService,
    OwnershipGuard,
    PostService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authentication_service(
        self, jwt_service: JWTService
    ) -> AuthenticationService:
        """Provide request authentication service."""
        return AuthenticationService(jwt_service=jwt_service)

    @provide
    def get_ownership_guard(self) -> OwnershipGuard:
        """Provide ownership guard."""
        return OwnershipGuard()

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        ownership_guard: OwnershipGuard,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            ownership_guard=ownership_guard,
            settings=comment_settings,
        )

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        moderation_log_repository: ModerationLogRepository,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_repository=comment_repository,
            moderation_log_repository=moderation_log_repository,
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, ownership_guard: OwnershipGuard
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, ownership_guard=ownership_guard
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, ownership_guard: OwnershipGuard
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, ownership_guard=ownership_guard
        )

    @provide
    def get_follow_service(
        self, follow_repository: FollowRepository, user_repository: UserRepository
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository, user_repository=user_repository
        )
