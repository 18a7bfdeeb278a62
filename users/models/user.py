import urlman
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """
    Custom user manager that understands emails and usernames
    """

    def create_user(self, email, username, password=None, **extra):
        user = self.create(email=email, username=username, **extra)
        if password:
            user.set_password(password)
            user.save()
        return user

    def create_superuser(self, email, username, password=None):
        return self.create_user(email, username, password=password, admin=True)

    def active(self):
        return self.filter(deleted=False, banned=False)


class User(AbstractBaseUser):
    """
    A local account; the subject of profiles and both ends of follows
    """

    email = models.EmailField(unique=True)
    username = models.CharField(max_length=100, unique=True)
    name = models.CharField(max_length=200, blank=True)

    admin = models.BooleanField(default=False)
    moderator = models.BooleanField(default=False)
    banned = models.BooleanField(default=False)
    deleted = models.BooleanField(default=False)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS: list[str] = ["username"]

    objects = UserManager()

    class urls(urlman.Urls):
        api = "/api/v1/users/{self.pk}"
        api_followers = "{api}/followers"
        api_following = "{api}/following"
        api_follow = "{api}/follow"
        api_unfollow = "{api}/unfollow"

    def __str__(self):
        return f"#{self.pk}: {self.username}"

    @property
    def is_active(self):
        return not (self.deleted or self.banned)

    @property
    def is_staff(self):
        return self.admin or self.moderator

