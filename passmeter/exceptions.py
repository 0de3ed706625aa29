"""
passmeter.exceptions

Errors raised by the configuration and presentation layers.
The evaluator itself never raises for string input.
"""


class PassMeterError(Exception):
    """Base class for passmeter errors."""


class PolicyError(PassMeterError, ValueError):
    """A policy value could not be coerced to its expected type."""

    def __init__(self, field: str, value, reason: str = ""):
        self.field = field
        self.value = value
        msg = f"Invalid value for {field!r}: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
