from .converters import (
    TypeConverter,
    converter,
    bool_converter,
    numeric_converter,
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_INT_CONVERTER,
    DEFAULT_FLOAT_CONVERTER,
    int_to_string,
    float_to_string,
    bool_to_string,
)
from .exceptions import WrongType
