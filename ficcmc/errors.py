"""Exception and warning types raised by the pricing engine.

Construction errors are raised before any component of a product is built,
so a failed construction never exposes a partial tree. Errors coming from a
market model propagate unchanged through valuation.
"""


class ArgumentError(ValueError):
    """Raised when product construction arguments are inconsistent."""

    pass


class UnsupportedVariantError(ArgumentError):
    """Raised when a coupon, notional or descriptor type is not supported."""

    pass


class ComputationError(RuntimeError):
    """Raised by a market model when a requested quantity cannot be computed."""

    pass


class DegenerateScheduleWarning(UserWarning):
    """Emitted when a zero-length schedule period is dropped from a leg."""

    pass
