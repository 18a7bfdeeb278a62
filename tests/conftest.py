import pytest

from core.models import Config
from users.models import Follow, User


@pytest.fixture
def config_system():
    Config.system = Config.SystemOptions()
    Config.__forced__ = True
    yield Config.system
    Config.__forced__ = False
    del Config.system


@pytest.fixture
@pytest.mark.django_db
def user() -> User:
    return User.objects.create_user(
        email="test@example.com", username="test", name="Test User"
    )


@pytest.fixture
@pytest.mark.django_db
def other_user() -> User:
    return User.objects.create_user(
        email="other@example.com", username="other", name="Other User"
    )


@pytest.fixture
@pytest.mark.django_db
def staff_user() -> User:
    return User.objects.create_superuser(email="admin@example.com", username="admin")


@pytest.fixture
def follow_relationship(user, other_user) -> Follow:
    """
    user follows other_user
    """
    return Follow.objects.create(source=user, target=other_user)


@pytest.fixture
def follower(follow_relationship) -> User:
    return follow_relationship.source


@pytest.fixture
def followed(follow_relationship) -> User:
    return follow_relationship.target


@pytest.fixture
def client_with_user(client, user):
    """
    Provides a logged-in test client
    """
    client.force_login(user)
    return client
