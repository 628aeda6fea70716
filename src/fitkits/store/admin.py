"""Admin registration for catalog and coupon administration."""

from django.contrib import admin

from .models import CouponCode, Kit, Order


@admin.register(Kit)
class KitAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "created_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ["name"]}


@admin.register(CouponCode)
class CouponCodeAdmin(admin.ModelAdmin):
    list_display = ["code", "usage", "created_at"]
    list_filter = ["usage"]
    search_fields = ["code"]

    def get_readonly_fields(self, request, obj=None):
        # Usage only changes when an order consumes the coupon
        if obj is not None:
            return ["code", "usage"]
        return []


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["confirmation_number", "first_name", "last_name", "kit", "coupon", "created_at"]
    list_select_related = ["kit", "coupon"]
    search_fields = ["first_name", "last_name", "email", "confirmation_number"]
    date_hierarchy = "created_at"

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
