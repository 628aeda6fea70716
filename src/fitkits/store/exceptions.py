"""Exceptions raised by the store service layer."""


class StoreError(Exception):
    """Base class for store errors."""

    pass


class KitNotFound(StoreError):
    """No kit exists for the requested slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No kit with slug '{slug}'")


class OrderNotFound(StoreError):
    """No order exists for the requested id."""

    def __init__(self, pk):
        self.pk = pk
        super().__init__(f"No order with id {pk}")


class CouponNotFound(StoreError):
    """The submitted coupon code does not match any coupon."""

    message = "Invalid coupon code"

    def __init__(self, code: str = ""):
        self.code = code
        super().__init__(self.message)


class CouponAlreadyUsed(StoreError):
    """The coupon has already been consumed by an order."""

    message = "This code has been used before and can no longer be used to place an order"

    def __init__(self, code: str = ""):
        self.code = code
        super().__init__(self.message)


class CommitConflict(StoreError):
    """The order could not be committed because of a concurrent write.

    The transaction was rolled back; resubmitting the same form is safe.
    """

    message = "We could not place your order. Please try again."

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(self.message)
