import json

from django.core.management.base import BaseCommand, CommandError

from core.exceptions import ConfigValueError
from core.models import Config

FOLLOW_OPTIONS = [
    "follow_enabled",
    "follow_show_statistics_on_profile",
    "follow_followers_visible",
    "follow_following_visible",
]


class Command(BaseCommand):
    help = "Shows or changes the site-wide follow options"

    def add_arguments(self, parser):
        parser.add_argument(
            "--set",
            dest="new_value",
            nargs=2,
            metavar=("KEY", "VALUE"),
            help="Store a new value; booleans are given as true/false",
        )

    def handle(self, new_value: list[str] | None = None, *args, **options):
        if new_value:
            key, raw_value = new_value
            if key not in FOLLOW_OPTIONS:
                raise CommandError(f"Unknown follow option {key}")
            # Booleans arrive as JSON literals, enum values as plain strings
            try:
                value = json.loads(raw_value)
            except json.JSONDecodeError:
                value = raw_value
            try:
                Config.set_system(key, value)
            except ConfigValueError as error:
                raise CommandError(str(error)) from error
            self.stdout.write(f"Set {key}")
        system = Config.load_system()
        for key in FOLLOW_OPTIONS:
            value = getattr(system, key)
            self.stdout.write(f"{key}: {getattr(value, 'value', value)}")
