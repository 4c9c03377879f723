"""Validation errors raised by the design engines."""

NON_POSITIVE = "non_positive"
OUT_OF_RANGE = "out_of_range"
NOT_FINITE = "not_finite"


class InvalidInputError(ValueError):
    """An input field failed validation before any computation ran.

    Attributes:
        field: name of the offending input field (e.g. "frequency_mhz").
        reason: one of NON_POSITIVE, OUT_OF_RANGE, NOT_FINITE.
    """

    def __init__(self, field: str, reason: str, message: str = ""):
        self.field = field
        self.reason = reason
        self.message = message or f"{field}: {reason.replace('_', ' ')}"
        super().__init__(self.message)
