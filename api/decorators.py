from functools import wraps

from django.http import JsonResponse


def login_required(function):
    """
    Makes sure there is a logged-in user, answering with a JSON 401 if not.
    """

    @wraps(function)
    def inner(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse({"error": "login_required"}, status=401)
        return function(request, *args, **kwargs)

    # This is for the API only
    inner.csrf_exempt = True  # type:ignore

    return inner
