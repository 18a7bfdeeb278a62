from .follow import FollowService  # noqa
from .visibility import (  # noqa
    FollowConfig,
    FollowCounts,
    ProfileVisibilityFields,
    Viewer,
    can_see_followers_page,
    can_see_following_page,
    resolve_profile_visibility,
)
