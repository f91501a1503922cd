"""Converter functions between stored strings and primitive values."""

from functools import wraps
from typing import Callable
import re
from .exceptions import WrongType

type Numerics = int | float
"""Possible numeric conversion result types."""

type TypeConverter[ConvertedType] = Callable[[str], ConvertedType]
"""Type of type converter functions. To create a type converter, use converter
decorator."""


def converter[T](processor: Callable[[str], T]) -> TypeConverter[T]:
    """Create a new TypeConverter.

    Args:
        processor (Callable[[str], T]): Callable to process the string input and
            convert it into an instance of arbitrary type. If conversion is not
            possible, should raise WrongType or ValueError.

    Returns:
        TypeConverter[T]: TypeConverter that will return the processed input on call
            and raise WrongType if conversion was not possible.
    """

    @wraps(processor)
    def convert(value: str) -> T:
        """Convert value.

        Args:
            value (str): The value to convert.

        Raises:
            WrongType: If conversion was impossible.

        Returns:
            T: The converted value.
        """
        if not isinstance(value, str):
            raise WrongType(f"Expected a string, got {type(value).__name__}.")
        try:
            return processor(value)
        except ValueError as e:
            raise WrongType(f"'{value}' could not be converted.") from e

    return convert


def bool_converter(
    true: str | tuple[str, ...] = ("true", "yes"),
    true_prefixes: str | tuple[str, ...] = ("1",),
) -> TypeConverter[bool]:
    """Create a new bool converter. Every string that isn't regarded as True is
    False, thus the converter never fails on strings.

    Args:
        true (str | tuple[str, ...], optional): String(s) that should be regarded as
            True (case-insensitive). Defaults to ("true", "yes").
        true_prefixes (str | tuple[str, ...], optional): Prefix(es) that make a
            string True. Defaults to ("1",).

    Returns:
        TypeConverter[bool]: The bool converter.
    """

    if not isinstance(true, tuple):
        true = (true,)
    true = tuple(i.casefold() for i in true)

    if not isinstance(true_prefixes, tuple):
        true_prefixes = (true_prefixes,)

    @converter
    def to_bool(string: str) -> bool:
        """Converts a string to bool.

        Args:
            string (str): The string to convert.

        Returns:
            bool: The converted boolean.
        """
        return string.startswith(true_prefixes) or string.casefold() in true

    return to_bool


NUMERIC_PREFIXES: dict[type, re.Pattern] = {
    int: re.compile(r"[+-]?\d+"),
    float: re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"),
}
"""Patterns of the leading number read by numeric converters, per result type."""


def numeric_converter[T: Numerics](numeric_type: type[T]) -> TypeConverter[T]:
    """Create a new numeric type converter. The converter reads the longest number
    at the start of the string (after leading whitespace) and ignores the rest, so
    "12abc" is 12 and "3.7" is 3 for int.

    Args:
        numeric_type (type[int] | type[float]): The type to convert to.

    Returns:
        TypeConverter[int | float]: The numeric type converter.
    """
    pattern = NUMERIC_PREFIXES[numeric_type]

    @converter
    def to_num(string: str) -> T:
        """Convert the leading number of string to numeric type.

        Args:
            string (str): The string to convert.

        Raises:
            WrongType: If the string doesn't start with a number.

        Returns:
            Numerics: Converted string.
        """
        if (match := pattern.match(string.lstrip())) is None:
            raise WrongType(f"'{string}' doesn't start with a number.")
        return numeric_type(match.group())

    return to_num


def int_to_string(value: int) -> str:
    return "%d" % value


def float_to_string(value: float) -> str:
    return "%g" % value


def bool_to_string(value: bool) -> str:
    return "True" if value else "False"


# default converters
DEFAULT_BOOL_CONVERTER = bool_converter()
"""Bool converter with default conversion parameters."""
DEFAULT_INT_CONVERTER = numeric_converter(int)
"""Integer converter with default conversion parameters."""
DEFAULT_FLOAT_CONVERTER = numeric_converter(float)
"""Float converter with default conversion parameters."""
