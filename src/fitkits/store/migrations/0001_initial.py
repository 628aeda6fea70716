# Initial store schema: kits, coupon codes and orders

import django.core.validators
import django.db.models.deletion
import django.db.models.functions.text
from django.db import migrations, models

import fitkits.store.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Kit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, unique=True)),
                ("description", models.TextField()),
                (
                    "slug",
                    models.CharField(
                        max_length=100,
                        unique=True,
                        validators=[
                            django.core.validators.RegexValidator(
                                code="invalid_slug",
                                message="may only contain lowercase letters, digits and hyphens",
                                regex="\\A[a-z0-9-]+\\Z",
                            )
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "fitness kit",
                "verbose_name_plural": "fitness kits",
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("slug", ""), _negated=True), name="store_kit_slug_not_empty"),
                    models.CheckConstraint(condition=models.Q(("name", ""), _negated=True), name="store_kit_name_not_empty"),
                ],
            },
        ),
        migrations.CreateModel(
            name="CouponCode",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(db_index=True, max_length=50)),
                (
                    "usage",
                    models.CharField(
                        choices=[("unused", "Unused"), ("used", "Used")],
                        default="unused",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "coupon code",
                "verbose_name_plural": "coupon codes",
                "constraints": [
                    models.UniqueConstraint(
                        django.db.models.functions.text.Upper("code"),
                        name="store_couponcode_code_ci_unique",
                        violation_error_message="Coupon code has already been taken.",
                    ),
                    models.CheckConstraint(condition=models.Q(("code", ""), _negated=True), name="store_couponcode_code_not_empty"),
                    models.CheckConstraint(
                        condition=models.Q(("usage__in", ["unused", "used"])),
                        name="store_couponcode_usage_valid",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("confirmation_number", models.PositiveIntegerField(unique=True)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                ("address1", models.CharField(max_length=255)),
                ("address2", models.CharField(blank=True, max_length=255)),
                ("city", models.CharField(max_length=100)),
                (
                    "state",
                    models.CharField(max_length=2, validators=[fitkits.store.validators.validate_us_state]),
                ),
                (
                    "zip",
                    models.CharField(
                        max_length=10,
                        validators=[
                            django.core.validators.RegexValidator(
                                code="invalid_zip",
                                message="must be 5 digits or ZIP+4",
                                regex="\\A[0-9]{5}(-[0-9]{4})?\\Z",
                            )
                        ],
                    ),
                ),
                (
                    "phone",
                    models.CharField(
                        max_length=10,
                        validators=[
                            fitkits.store.validators.validate_phone_length,
                            fitkits.store.validators.validate_phone_digits,
                        ],
                    ),
                ),
                ("email", models.EmailField(max_length=254)),
                ("description", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "coupon",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="order",
                        to="store.couponcode",
                    ),
                ),
                (
                    "kit",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="orders",
                        to="store.kit",
                    ),
                ),
            ],
            options={
                "verbose_name": "order",
                "verbose_name_plural": "orders",
                "indexes": [
                    models.Index(fields=["created_at"], name="store_order_created_idx"),
                    models.Index(fields=["email"], name="store_order_email_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("confirmation_number__gte", 1)),
                        name="store_order_confirmation_positive",
                    ),
                ],
            },
        ),
    ]
