"""
Decides which follow statistics and flags a profile shows to a given viewer.

Everything here is pure: callers pass in an immutable snapshot of the follow
options, the viewer, and the counts, and get back the fields to merge into
the profile representation.
"""

from typing import Optional

import pydantic

from core import models as core_models
from core.models.config import FollowPagesVisibility
from users.models import User


class FollowConfig(pydantic.BaseModel):
    """
    Snapshot of the site-wide follow options for a single request
    """

    follow_enabled: bool = True
    show_statistics_on_profile: bool = True
    followers_visibility: FollowPagesVisibility = FollowPagesVisibility.EVERYONE
    following_visibility: FollowPagesVisibility = FollowPagesVisibility.EVERYONE

    class Config:
        frozen = True

    @classmethod
    def from_system(cls, options: core_models.Config.SystemOptions) -> "FollowConfig":
        return cls(
            follow_enabled=options.follow_enabled,
            show_statistics_on_profile=options.follow_show_statistics_on_profile,
            followers_visibility=options.follow_followers_visible,
            following_visibility=options.follow_following_visible,
        )


class FollowCounts(pydantic.BaseModel):
    followers: pydantic.NonNegativeInt = 0
    following: pydantic.NonNegativeInt = 0

    class Config:
        frozen = True


class Viewer(pydantic.BaseModel):
    """
    Who is looking at a profile. user_id is None for anonymous viewers;
    is_staff lets the viewer through the all-users and self tiers.
    """

    user_id: int | None = None
    is_staff: bool = False

    class Config:
        frozen = True

    @classmethod
    def anonymous(cls) -> "Viewer":
        return cls()

    @classmethod
    def for_user(cls, user: Optional[User]) -> "Viewer":
        if user is None or not user.is_authenticated:
            return cls.anonymous()
        return cls(user_id=user.pk, is_staff=user.is_staff)

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None

    def is_subject(self, subject: User) -> bool:
        return self.user_id is not None and self.user_id == subject.pk


class ProfileVisibilityFields(pydantic.BaseModel):
    """
    The follow-related fields of a profile. None means the field is absent
    and must be left out of the payload entirely.
    """

    total_followers: int | None = None
    total_following: int | None = None
    can_see_followers: bool | None = None
    can_see_following: bool | None = None
    can_see_network_tab: bool | None = None

    class Config:
        frozen = True

    def is_present(self, name: str) -> bool:
        return getattr(self, name) is not None

    def to_json(self) -> dict:
        return self.dict(exclude_none=True)


def check_page_visibility(
    visibility: FollowPagesVisibility,
    subject: User,
    viewer: Viewer,
) -> bool:
    if visibility == FollowPagesVisibility.EVERYONE:
        return True
    if visibility == FollowPagesVisibility.ALL_USERS:
        return not viewer.is_anonymous
    if visibility == FollowPagesVisibility.SELF:
        return viewer.is_staff or viewer.is_subject(subject)
    if visibility == FollowPagesVisibility.NO_ONE:
        return False
    raise ValueError(f"Unknown follow page visibility {visibility!r}")


def can_see_followers_page(subject: User, viewer: Viewer, config: FollowConfig) -> bool:
    return check_page_visibility(config.followers_visibility, subject, viewer)


def can_see_following_page(subject: User, viewer: Viewer, config: FollowConfig) -> bool:
    return check_page_visibility(config.following_visibility, subject, viewer)


def resolve_profile_visibility(
    subject: User,
    viewer: Viewer,
    config: FollowConfig,
    counts: FollowCounts,
) -> ProfileVisibilityFields:
    if not config.follow_enabled:
        return ProfileVisibilityFields()
    # The statistics toggle hides only the counts, never the network tab
    if not config.show_statistics_on_profile:
        return ProfileVisibilityFields(
            can_see_followers=True,
            can_see_following=True,
            can_see_network_tab=True,
        )
    can_see_followers = can_see_followers_page(subject, viewer, config)
    can_see_following = can_see_following_page(subject, viewer, config)
    return ProfileVisibilityFields(
        total_followers=counts.followers if can_see_followers else None,
        total_following=counts.following if can_see_following else None,
        can_see_followers=can_see_followers,
        can_see_following=can_see_following,
        can_see_network_tab=True,
    )
