from .follow import Follow, FollowQuerySet  # noqa
from .user import User, UserManager  # noqa
