from hatchway import Schema

from users import models as users_models
from users.services import (
    FollowConfig,
    FollowCounts,
    FollowService,
    Viewer,
    resolve_profile_visibility,
)


class UserProfile(Schema):
    id: str
    username: str
    display_name: str
    created_at: str

    @classmethod
    def from_user(cls, user: users_models.User) -> "UserProfile":
        return cls(
            id=str(user.pk),
            username=user.username,
            display_name=user.name or user.username,
            created_at=user.created.isoformat(),
        )

    @classmethod
    def json_for_viewer(
        cls,
        user: users_models.User,
        viewer: Viewer,
        config: FollowConfig,
    ) -> dict:
        """
        Returns the profile as JSON with whichever follow fields this viewer
        gets to see. Hidden fields are left out rather than set to null.
        """
        result = cls.from_user(user).dict()
        counts = FollowCounts()
        if config.follow_enabled and config.show_statistics_on_profile:
            counts = FollowService(user).counts()
        result.update(
            resolve_profile_visibility(user, viewer, config, counts).to_json()
        )
        return result


class Relationship(Schema):
    id: str
    following: bool
    followed_by: bool

    @classmethod
    def from_user_pair(
        cls,
        user: users_models.User,
        from_user: users_models.User,
    ) -> "Relationship":
        return cls(
            id=str(user.pk),
            following=FollowService(from_user).is_following(user),
            followed_by=FollowService(user).is_following(from_user),
        )
