"""Store URL patterns."""

from django.urls import path, register_converter

from . import views
from .converters import KitSlugConverter

app_name = "store"

register_converter(KitSlugConverter, "kit")

urlpatterns = [
    path("", views.KitListView.as_view(), name="home"),
    path("orders/<int:pk>/", views.OrderDetailView.as_view(), name="order-detail"),
    # Catch-all for kit slugs, must stay last
    path("<kit:slug>/", views.OrderCreateView.as_view(), name="order-new"),
]
