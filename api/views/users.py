from django.http import HttpRequest
from django.shortcuts import get_object_or_404
from hatchway import ApiError, api_view

from api import schemas
from api.decorators import login_required
from core.models import Config
from users.models import User
from users.services import (
    FollowConfig,
    FollowService,
    Viewer,
    can_see_followers_page,
    can_see_following_page,
)


def follow_config() -> FollowConfig:
    return FollowConfig.from_system(Config.system)


def require_follow_enabled(config: FollowConfig):
    if not config.follow_enabled:
        raise ApiError(404, "not_found")


@api_view.get
def user_profile(request: HttpRequest, id: int) -> dict:
    user = get_object_or_404(User.objects.active(), pk=id)
    return schemas.UserProfile.json_for_viewer(
        user, Viewer.for_user(request.user), follow_config()
    )


@api_view.get
def user_followers(request: HttpRequest, id: int, limit: int = 40) -> list[dict]:
    user = get_object_or_404(User.objects.active(), pk=id)
    config = follow_config()
    require_follow_enabled(config)
    viewer = Viewer.for_user(request.user)
    if not can_see_followers_page(user, viewer, config):
        raise ApiError(403, "followers_hidden")
    limit = min(max(limit, 1), 80)
    return [
        schemas.UserProfile.json_for_viewer(follower, viewer, config)
        for follower in FollowService(user).followers()[:limit]
    ]


@api_view.get
def user_following(request: HttpRequest, id: int, limit: int = 40) -> list[dict]:
    user = get_object_or_404(User.objects.active(), pk=id)
    config = follow_config()
    require_follow_enabled(config)
    viewer = Viewer.for_user(request.user)
    if not can_see_following_page(user, viewer, config):
        raise ApiError(403, "following_hidden")
    limit = min(max(limit, 1), 80)
    return [
        schemas.UserProfile.json_for_viewer(followed, viewer, config)
        for followed in FollowService(user).following()[:limit]
    ]


@login_required
@api_view.post
def user_follow(request: HttpRequest, id: int) -> schemas.Relationship:
    user = get_object_or_404(User.objects.active(), pk=id)
    require_follow_enabled(follow_config())
    try:
        FollowService(request.user).follow(user)
    except ValueError as error:
        raise ApiError(400, str(error))
    return schemas.Relationship.from_user_pair(user, request.user)


@login_required
@api_view.post
def user_unfollow(request: HttpRequest, id: int) -> schemas.Relationship:
    user = get_object_or_404(User.objects.active(), pk=id)
    require_follow_enabled(follow_config())
    try:
        FollowService(request.user).unfollow(user)
    except ValueError as error:
        raise ApiError(400, str(error))
    return schemas.Relationship.from_user_pair(user, request.user)
