from django.urls import path

from api.views import users

urlpatterns = [
    path("v1/users/<int:id>", users.user_profile),
    path("v1/users/<int:id>/followers", users.user_followers),
    path("v1/users/<int:id>/following", users.user_following),
    path("v1/users/<int:id>/follow", users.user_follow),
    path("v1/users/<int:id>/unfollow", users.user_unfollow),
]
