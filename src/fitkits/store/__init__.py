"""Store app for fitness kit order intake.

Catalog of kits, single-use coupon codes, and the order workflow
that consumes a coupon while creating an order.
"""
