"""Expose routers to be imported in api.main."""
from . import (
    auth,
    reset,
    products,
    orders,
    contact,
    health,
    metrics,
)  # noqa: F401
