"""
Typed failures raised when a generic Tuple is narrowed to a Point or Vector.
"""


class TupleConversionError(ValueError):
    """Base class for failed Tuple -> Point/Vector conversions."""


class BadWError(TupleConversionError):
    """The homogeneous component does not match the target type."""

    def __init__(self, target: str, expected: float, actual: float) -> None:
        self.target = target
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cannot convert to {target}: expected w={expected}, got w={actual}."
        )


class WrongLengthError(TupleConversionError):
    """The source does not have exactly four components."""

    def __init__(self, actual: int) -> None:
        self.actual = actual
        super().__init__(f"Expected 4 components, got {actual}.")
