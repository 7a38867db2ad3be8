"""Exceptions raised by the type scale pipeline."""


class DomainError(ValueError):
    """Raised when a divisor (steps, grid height, rounding multiple) is zero or out of range."""


class UnitError(ValueError):
    """Raised for a CSS unit outside the recognized set."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unsupported unit {unit!r}")
