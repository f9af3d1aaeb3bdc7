"""
Argument type validation for the public helpers.

**Conceptual**: Every public function checks the *types* of its arguments before
doing any work, and nothing else. Range checks (negative channels, zero
divisors, malformed hex digits) are deliberately absent: those inputs flow
through the arithmetic and produce whatever the double-precision result is.

**Numeric**: a real number. Python ints and floats, NumPy integer and floating
scalars, nan and the infinities all count. `bool` does not, even though it is an
int subclass, and neither do complex numbers or numeric-looking strings.
"""

import pandas as pd


class InvalidArgumentError(TypeError):
    """
    Raised when a public helper receives an argument of the wrong type.

    Also raised for an unrecognized timestamp format tag. Subclasses TypeError
    so callers that already catch TypeError keep working.
    """
    pass


def is_numeric(value) -> bool:
    """
    Return True if value is a real number (nan and infinities included).

    Examples:
        is_numeric(3) -> True
        is_numeric(float("nan")) -> True
        is_numeric(numpy.int64(7)) -> True
        is_numeric(True) -> False
        is_numeric("3") -> False
    """
    if pd.api.types.is_bool(value) or pd.api.types.is_complex(value):
        return False
    return pd.api.types.is_number(value)


def _describe_names(names: list[str]) -> str:
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def require_numeric(**named) -> None:
    """
    Raise InvalidArgumentError unless every keyword value is numeric.

    The keyword names appear in the message, so call sites read naturally:
        require_numeric(min=min_value, max=max_value)
        -> "The min and max must be numbers (got str for max)"

    Raises:
        InvalidArgumentError: If any value is not numeric.
    """
    for name, value in named.items():
        if not is_numeric(value):
            names = list(named)
            noun = "a number" if len(names) == 1 else "numbers"
            raise InvalidArgumentError(
                f"The {_describe_names(names)} must be {noun} "
                f"(got {type(value).__name__} for {name})"
            )


def require_all_numeric(values) -> list:
    """
    Raise InvalidArgumentError unless every element of values is numeric.

    Args:
        values: Any iterable (list, tuple, generator, numpy array, pandas Series).

    Returns:
        The elements as a list, so one-shot iterables can be consumed afterwards.

    Raises:
        InvalidArgumentError: If any element is not numeric.
    """
    items = list(values)
    for index, value in enumerate(items):
        if not is_numeric(value):
            raise InvalidArgumentError(
                f"All the arguments must be numbers "
                f"(got {type(value).__name__} at position {index})"
            )
    return items


def require_string(**named) -> None:
    """Raise InvalidArgumentError unless every keyword value is a str."""
    for name, value in named.items():
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"The {name} must be a string (got {type(value).__name__})"
            )
