"""Store models: kits, coupon codes and orders."""

from django.db import models
from django.db.models.functions import Upper

from .normalizers import normalize_coupon_code
from .validators import (
    validate_kit_slug,
    validate_phone_digits,
    validate_phone_length,
    validate_us_state,
    validate_zip,
)


class KitQuerySet(models.QuerySet):
    def ordered_by_name(self):
        return self.order_by("name")


class Kit(models.Model):
    """A purchasable fitness kit, addressed by its slug."""

    name = models.CharField(max_length=200, unique=True)
    description = models.TextField()
    slug = models.CharField(max_length=100, unique=True, validators=[validate_kit_slug])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = KitQuerySet.as_manager()

    class Meta:
        verbose_name = "fitness kit"
        verbose_name_plural = "fitness kits"
        constraints = [
            models.CheckConstraint(condition=~models.Q(slug=""), name="store_kit_slug_not_empty"),
            models.CheckConstraint(condition=~models.Q(name=""), name="store_kit_name_not_empty"),
        ]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        # Slug format is enforced here as well as in forms
        self.full_clean()
        super().save(*args, **kwargs)


class CouponCodeQuerySet(models.QuerySet):
    def unused(self):
        return self.filter(usage=CouponCode.Usage.UNUSED)

    def used(self):
        return self.filter(usage=CouponCode.Usage.USED)


class CouponCode(models.Model):
    """Single-use redemption code.

    Codes are stored uppercased and trimmed. Usage moves from unused to
    used exactly once, when an order consumes the coupon.
    """

    class Usage(models.TextChoices):
        UNUSED = "unused", "Unused"
        USED = "used", "Used"

    code = models.CharField(max_length=50, db_index=True)
    usage = models.CharField(max_length=10, choices=Usage.choices, default=Usage.UNUSED)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CouponCodeQuerySet.as_manager()

    class Meta:
        verbose_name = "coupon code"
        verbose_name_plural = "coupon codes"
        constraints = [
            models.UniqueConstraint(
                Upper("code"),
                name="store_couponcode_code_ci_unique",
                violation_error_message="Coupon code has already been taken.",
            ),
            models.CheckConstraint(condition=~models.Q(code=""), name="store_couponcode_code_not_empty"),
            models.CheckConstraint(
                condition=models.Q(usage__in=["unused", "used"]),
                name="store_couponcode_usage_valid",
            ),
        ]

    def __str__(self):
        return self.code

    @property
    def is_used(self):
        return self.usage == self.Usage.USED

    @property
    def is_unused(self):
        return self.usage == self.Usage.UNUSED

    def clean(self):
        self.code = normalize_coupon_code(self.code)

    def save(self, *args, **kwargs):
        """Normalize code to uppercase before saving."""
        self.code = normalize_coupon_code(self.code)
        super().save(*args, **kwargs)


class OrderQuerySet(models.QuerySet):
    def recent(self):
        return self.order_by("-created_at", "-pk")


class Order(models.Model):
    """A completed order intake.

    Created once by the order workflow, together with consuming its
    coupon, and never modified afterwards.
    """

    kit = models.ForeignKey(Kit, on_delete=models.PROTECT, related_name="orders")
    coupon = models.OneToOneField(CouponCode, on_delete=models.PROTECT, related_name="order")
    confirmation_number = models.PositiveIntegerField(unique=True)

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    address1 = models.CharField(max_length=255)
    address2 = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=2, validators=[validate_us_state])
    zip = models.CharField(max_length=10, validators=[validate_zip])
    phone = models.CharField(max_length=10, validators=[validate_phone_length, validate_phone_digits])
    email = models.EmailField()
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = OrderQuerySet.as_manager()

    class Meta:
        verbose_name = "order"
        verbose_name_plural = "orders"
        indexes = [
            models.Index(fields=["created_at"], name="store_order_created_idx"),
            models.Index(fields=["email"], name="store_order_email_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(confirmation_number__gte=1),
                name="store_order_confirmation_positive",
            ),
        ]

    def __str__(self):
        if self.confirmation_number is None:
            return "New order"
        return f"Order {self.formatted_order_confirmation}"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    @property
    def formatted_order_confirmation(self):
        """Confirmation number zero-padded to six digits, e.g. '000042'."""
        return f"{self.confirmation_number:06d}"

    @property
    def formatted_phone(self):
        """Phone as (AAA) BBB-CCCC."""
        phone = self.phone
        return f"({phone[0:3]}) {phone[3:6]}-{phone[6:10]}"

    @property
    def full_address(self):
        """Postal address lines joined with newlines, address2 only if present."""
        lines = [self.address1, self.address2, f"{self.city}, {self.state} {self.zip}"]
        return "\n".join(line for line in lines if line)
