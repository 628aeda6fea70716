"""URL configuration for FitKits project."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Django admin (catalog and coupon administration)
    path("admin/", admin.site.urls),

    # Store (catalog, order intake, confirmations)
    path("", include("fitkits.store.urls", namespace="store")),
]
