"""Text helpers shared by the parser, the serializer and the document."""

import re
from typing import Callable
from .globals import WHITESPACE, DEFAULT_EQUAL_INDICATORS


def copy_doc[
    **P, T
](doc_source: Callable[P, T], annotations: bool = False) -> Callable[
    [Callable[P, T]], Callable[P, T]
]:
    """Decorator to copy the docstring of doc_source to another.
    Inspired by Trevor (stackoverflow.com/users/13905088/trevor)
    from: stackoverflow.com/questions/68901049/
        copying-the-docstring-of-function-onto-another-function-by-name

    Args:
        doc_source (Callable): The source function to copy the docstring from.
        annotations (bool, optional): Whether to also copy annotations. Defaults to False.

    Returns:
        Callable: The decorated function.

    """

    def wrapped(doc_target: Callable[P, T]) -> Callable[P, T]:
        doc_target.__doc__ = doc_source.__doc__
        if annotations:
            doc_target.__annotations__ = doc_source.__annotations__
        return doc_target

    return wrapped


def _as_chars(indicators: str | tuple[str, ...]) -> str:
    return indicators if isinstance(indicators, str) else "".join(indicators)


def trim(
    string: str, equal_indicators: str | tuple[str, ...] = DEFAULT_EQUAL_INDICATORS
) -> str:
    """Remove whitespace and equal indicators from both ends of a string.

    Args:
        string (str): The string to trim.
        equal_indicators (str | tuple[str, ...], optional): Characters delimiting
            keys from values. Defaults to "=".

    Returns:
        str: The trimmed string.
    """
    return string.strip(WHITESPACE + _as_chars(equal_indicators))


def compare_no_case(a: str, b: str) -> int:
    """Compare two strings ignoring case.

    Returns:
        int: Negative if a sorts before b, 0 if both are equal, positive otherwise.
    """
    a, b = a.casefold(), b.casefold()
    return (a > b) - (a < b)


def equals_no_case(a: str, b: str) -> bool:
    return compare_no_case(a, b) == 0


def split_key_value(
    line: str, equal_indicators: str | tuple[str, ...] = DEFAULT_EQUAL_INDICATORS
) -> tuple[str, str]:
    """Split a line at the first equal indicator.

    The key is trimmed (see trim), the value keeps its inner content and only loses
    whitespace at its edges. Lines without any equal indicator are all key and
    an empty value.

    Args:
        line (str): The line to split.
        equal_indicators (str | tuple[str, ...], optional): Characters delimiting
            keys from values. Defaults to "=".

    Returns:
        tuple[str, str]: Key and value.
    """
    delimiters = _as_chars(equal_indicators)
    match = re.search(f"[{re.escape(delimiters)}]", line) if delimiters else None
    if match is None:
        return trim(line, equal_indicators), ""
    return (
        trim(line[: match.start()], equal_indicators),
        line[match.end() :].strip(WHITESPACE),
    )


def strip_comment_indicators(
    line: str, comment_indicators: str | tuple[str, ...]
) -> str:
    """Remove the leading comment indicator(s) and surrounding whitespace of a
    comment line."""
    line = line.strip(WHITESPACE).lstrip(_as_chars(comment_indicators))
    return line.strip(WHITESPACE)
