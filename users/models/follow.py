from typing import Optional

from django.db import models


class FollowQuerySet(models.QuerySet):
    def active(self):
        """
        Follows where neither end has been deleted or banned
        """
        return self.filter(
            source__deleted=False,
            source__banned=False,
            target__deleted=False,
            target__banned=False,
        )


class FollowManager(models.Manager):
    def get_queryset(self):
        return FollowQuerySet(self.model, using=self._db)

    def active(self):
        return self.get_queryset().active()


class Follow(models.Model):
    """
    When one user (the source) follows other (the target)
    """

    source = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="outbound_follows",
    )
    target = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="inbound_follows",
    )

    created = models.DateTimeField(auto_now_add=True)

    objects = FollowManager()

    class Meta:
        unique_together = [("source", "target")]

    def __str__(self):
        return f"#{self.id}: {self.source} → {self.target}"

    @classmethod
    def maybe_get(cls, source, target) -> Optional["Follow"]:
        """
        Returns a follow if it exists between source and target
        """
        try:
            return Follow.objects.get(source=source, target=target)
        except Follow.DoesNotExist:
            return None
