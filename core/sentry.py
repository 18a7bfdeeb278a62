from django.conf import settings

SENTRY_ENABLED = False
try:
    if settings.SETUP.SENTRY_DSN:
        import sentry_sdk

        SENTRY_ENABLED = True
except ImportError:
    pass


def noop(*args, **kwargs):
    pass


if SENTRY_ENABLED:
    set_tag = sentry_sdk.set_tag
else:
    set_tag = noop


def set_mutuals_app(name: str):
    set_tag("mutuals.app", name)
