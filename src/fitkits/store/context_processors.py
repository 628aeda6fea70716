"""Template context shared by every store page."""

from django.conf import settings


def store(request):
    return {"store_name": settings.STORE_NAME}
