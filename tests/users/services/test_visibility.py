import pydantic
import pytest
from django.contrib.auth.models import AnonymousUser

from core.models import Config
from core.models.config import FollowPagesVisibility
from users.models import User
from users.services import (
    FollowConfig,
    FollowCounts,
    ProfileVisibilityFields,
    Viewer,
    resolve_profile_visibility,
)

EVERYONE = FollowPagesVisibility.EVERYONE
ALL_USERS = FollowPagesVisibility.ALL_USERS
SELF = FollowPagesVisibility.SELF
NO_ONE = FollowPagesVisibility.NO_ONE

ALL_FIELDS = {
    "total_followers",
    "total_following",
    "can_see_followers",
    "can_see_following",
    "can_see_network_tab",
}


@pytest.fixture
def subject() -> User:
    return User(pk=1, email="subject@example.com", username="subject")


@pytest.fixture
def stranger() -> User:
    return User(pk=2, email="stranger@example.com", username="stranger")


@pytest.fixture
def counts() -> FollowCounts:
    return FollowCounts(followers=1, following=1)


def viewers(subject, stranger):
    return [
        Viewer.anonymous(),
        Viewer.for_user(subject),
        Viewer.for_user(stranger),
        Viewer(user_id=99, is_staff=True),
    ]


@pytest.mark.parametrize("show_statistics", [True, False])
@pytest.mark.parametrize("followers_visibility", list(FollowPagesVisibility))
@pytest.mark.parametrize("following_visibility", list(FollowPagesVisibility))
def test_disabled_hides_everything(
    subject,
    stranger,
    counts,
    show_statistics,
    followers_visibility,
    following_visibility,
):
    """
    With follow turned off no field is present, whatever the rest says
    """
    config = FollowConfig(
        follow_enabled=False,
        show_statistics_on_profile=show_statistics,
        followers_visibility=followers_visibility,
        following_visibility=following_visibility,
    )
    for viewer in viewers(subject, stranger):
        fields = resolve_profile_visibility(subject, viewer, config, counts)
        assert fields.to_json() == {}
        assert not any(fields.is_present(name) for name in ALL_FIELDS)


@pytest.mark.parametrize("followers_visibility", list(FollowPagesVisibility))
@pytest.mark.parametrize("following_visibility", list(FollowPagesVisibility))
def test_statistics_off_hides_counts_only(
    subject, stranger, counts, followers_visibility, following_visibility
):
    config = FollowConfig(
        show_statistics_on_profile=False,
        followers_visibility=followers_visibility,
        following_visibility=following_visibility,
    )
    for viewer in viewers(subject, stranger):
        fields = resolve_profile_visibility(subject, viewer, config, counts)
        assert fields.to_json() == {
            "can_see_followers": True,
            "can_see_following": True,
            "can_see_network_tab": True,
        }


def test_everything_visible(subject, stranger):
    config = FollowConfig()
    counts = FollowCounts(followers=7, following=3)
    for viewer in viewers(subject, stranger):
        fields = resolve_profile_visibility(subject, viewer, config, counts)
        assert fields.to_json() == {
            "total_followers": 7,
            "total_following": 3,
            "can_see_followers": True,
            "can_see_following": True,
            "can_see_network_tab": True,
        }


def test_anonymous_viewer_sees_counts(subject, counts):
    fields = resolve_profile_visibility(
        subject, Viewer.anonymous(), FollowConfig(), counts
    )
    assert fields.total_followers == 1
    assert fields.total_following == 1
    assert fields.can_see_following is True
    assert fields.can_see_followers is True


def test_followers_hidden_from_self(subject, counts):
    """
    no-one on the followers page hides the follower count even from the
    subject, and leaves the following side alone
    """
    config = FollowConfig(followers_visibility=NO_ONE)
    fields = resolve_profile_visibility(subject, Viewer.for_user(subject), config, counts)
    assert not fields.is_present("total_followers")
    assert fields.total_following == 1
    assert fields.can_see_followers is False
    assert fields.can_see_following is True
    assert fields.can_see_network_tab is True


def test_following_hidden_from_self(subject, counts):
    config = FollowConfig(following_visibility=NO_ONE)
    fields = resolve_profile_visibility(subject, Viewer.for_user(subject), config, counts)
    assert not fields.is_present("total_following")
    assert fields.total_followers == 1
    assert fields.can_see_following is False
    assert fields.can_see_followers is True
    assert fields.can_see_network_tab is True


def test_zero_counts_are_present(subject):
    """
    A zero count is still a value, distinct from an absent one
    """
    fields = resolve_profile_visibility(
        subject, Viewer.anonymous(), FollowConfig(), FollowCounts()
    )
    assert fields.to_json()["total_followers"] == 0
    assert fields.to_json()["total_following"] == 0


@pytest.mark.parametrize(
    ["visibility", "anonymous", "subject_self", "stranger_user", "staff"],
    [
        (EVERYONE, True, True, True, True),
        (ALL_USERS, False, True, True, True),
        (SELF, False, True, False, True),
        (NO_ONE, False, False, False, False),
    ],
)
def test_visibility_tiers(
    subject, stranger, counts, visibility, anonymous, subject_self, stranger_user, staff
):
    config = FollowConfig(followers_visibility=visibility)
    expected = {
        Viewer.anonymous(): anonymous,
        Viewer.for_user(subject): subject_self,
        Viewer.for_user(stranger): stranger_user,
        Viewer(user_id=99, is_staff=True): staff,
    }
    for viewer, visible in expected.items():
        fields = resolve_profile_visibility(subject, viewer, config, counts)
        assert fields.can_see_followers is visible
        assert fields.is_present("total_followers") is visible
        # The other side is untouched
        assert fields.total_following == 1
        assert fields.can_see_network_tab is True


def test_resolve_is_idempotent(subject, stranger, counts):
    config = FollowConfig(followers_visibility=SELF, following_visibility=NO_ONE)
    viewer = Viewer.for_user(stranger)
    first = resolve_profile_visibility(subject, viewer, config, counts)
    second = resolve_profile_visibility(subject, viewer, config, counts)
    assert first == second
    assert first.to_json() == second.to_json()


def test_fields_are_immutable():
    fields = ProfileVisibilityFields(total_followers=1)
    with pytest.raises(TypeError):
        fields.total_followers = 2


def test_config_rejects_unknown_visibility():
    with pytest.raises(pydantic.ValidationError):
        FollowConfig(followers_visibility="friends-of-friends")


def test_config_from_system():
    options = Config.SystemOptions(
        follow_enabled=False,
        follow_show_statistics_on_profile=False,
        follow_followers_visible="self",
        follow_following_visible="no-one",
    )
    config = FollowConfig.from_system(options)
    assert config.follow_enabled is False
    assert config.show_statistics_on_profile is False
    assert config.followers_visibility == SELF
    assert config.following_visibility == NO_ONE


def test_viewer_for_anonymous_user():
    assert Viewer.for_user(AnonymousUser()) == Viewer.anonymous()
    assert Viewer.for_user(None).is_anonymous


def test_viewer_for_moderator_is_staff():
    moderator = User(pk=5, email="mod@example.com", username="mod", moderator=True)
    viewer = Viewer.for_user(moderator)
    assert viewer.user_id == 5
    assert viewer.is_staff
