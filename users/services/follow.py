import logging

from django.db import models

from users.models import Follow, User
from users.services.visibility import FollowCounts

logger = logging.getLogger(__name__)


class FollowService:
    """
    High-level helper methods for following and unfollowing as a user
    """

    def __init__(self, user: User):
        self.user = user

    def following(self) -> models.QuerySet[User]:
        return (
            User.objects.active()
            .filter(inbound_follows__source=self.user)
            .distinct()
            .order_by("username")
        )

    def followers(self) -> models.QuerySet[User]:
        return (
            User.objects.active()
            .filter(outbound_follows__target=self.user)
            .distinct()
            .order_by("username")
        )

    def counts(self) -> FollowCounts:
        return FollowCounts(
            followers=Follow.objects.active().filter(target=self.user).count(),
            following=Follow.objects.active().filter(source=self.user).count(),
        )

    def is_following(self, target: User) -> bool:
        return Follow.objects.filter(source=self.user, target=target).exists()

    def follow(self, target: User) -> Follow:
        """
        Follows a user (or does nothing if already followed).
        Returns the follow.
        """
        if target == self.user:
            raise ValueError("You cannot follow yourself")
        follow, created = Follow.objects.get_or_create(source=self.user, target=target)
        if created:
            logger.info("%s followed %s", self.user, target)
        return follow

    def unfollow(self, target: User):
        """
        Unfollows a user (or does nothing if not followed).
        """
        if target == self.user:
            raise ValueError("You cannot unfollow yourself")
        existing_follow = Follow.maybe_get(self.user, target)
        if existing_follow:
            existing_follow.delete()
            logger.info("%s unfollowed %s", self.user, target)
