import enum
from typing import ClassVar

import pydantic
from django.db import models

from core.exceptions import ConfigValueError
from mutuals import __version__


class FollowPagesVisibility(str, enum.Enum):
    """
    Who may see a user's followers or following page (and its count)
    """

    EVERYONE = "everyone"
    ALL_USERS = "all-users"
    SELF = "self"
    NO_ONE = "no-one"


class Config(models.Model):
    """
    A site-wide configuration setting.

    The possible options and their defaults are defined at the bottom of the file;
    only values that differ from the default are stored.
    """

    key = models.CharField(max_length=500, unique=True)

    json = models.JSONField(blank=True, null=True)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    system: ClassVar["Config.SystemOptions"]  # type: ignore

    def __str__(self):
        return f"{self.key} = {self.json!r}"

    @classmethod
    def load_system(cls) -> "Config.SystemOptions":
        """
        Loads the system config options object
        """
        values = {}
        for config in cls.objects.all():
            if config.json is not None:
                values[config.key] = config.json
        values["version"] = __version__
        return cls.SystemOptions(**values)

    @classmethod
    def coerce_system_value(cls, key, value):
        """
        Checks value against the declared type of the option and returns
        what should be stored in the JSON column.
        """
        if key not in cls.SystemOptions.__fields__:
            raise ConfigValueError(f"Undefined SystemOption for {key}")
        config_field = cls.SystemOptions.__fields__[key]
        if issubclass(config_field.type_, enum.Enum):
            try:
                return config_field.type_(value).value
            except ValueError:
                raise ConfigValueError(f"Invalid value for {key}: {value!r}")
        if not isinstance(value, config_field.type_):
            raise ConfigValueError(f"Invalid type for {key}: {type(value)}")
        return value

    @classmethod
    def set_system(cls, key, value):
        if value is None:
            cls.objects.filter(key=key).delete()
            return
        value = cls.coerce_system_value(key, value)
        default = cls.SystemOptions.__fields__[key].default
        if isinstance(default, enum.Enum):
            default = default.value
        if value == default:
            cls.objects.filter(key=key).delete()
        else:
            cls.objects.update_or_create(key=key, defaults={"json": value})

    class SystemOptions(pydantic.BaseModel):

        version: str = __version__

        site_name: str = "Mutuals"

        follow_enabled: bool = True
        follow_show_statistics_on_profile: bool = True
        follow_followers_visible: FollowPagesVisibility = FollowPagesVisibility.EVERYONE
        follow_following_visible: FollowPagesVisibility = FollowPagesVisibility.EVERYONE
