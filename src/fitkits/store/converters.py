"""URL converters for store routes."""

from . import services


class KitSlugConverter:
    """Match a path segment only if it is the slug of an existing kit.

    Unknown slugs fall through the URLconf and end as a 404 without the
    order views ever running.
    """

    regex = "[a-z0-9-]+"

    def to_python(self, value):
        if not services.kit_exists(value):
            raise ValueError(f"No kit with slug '{value}'")
        return value

    def to_url(self, value):
        return str(value)
