"""Ini entities are sections and the keys they hold, each with an optional
comment."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Self
from .globals import SECTION_OPEN, SECTION_CLOSE, DEFAULT_SECTION_NAME
from .utils import equals_no_case


def comment_to_lines(comment: str, comment_indicators: tuple[str, ...]) -> list[str]:
    """Convert a comment into ini comment lines.

    Every line that doesn't start with a comment indicator yet gets the first
    indicator and a space prepended.

    Args:
        comment (str): The comment, possibly spanning multiple lines.
        comment_indicators (tuple[str, ...]): Characters that start a comment line.

    Returns:
        list[str]: The comment lines or an empty list if the comment is blank.
    """
    if not comment.strip():
        return []
    return [
        (
            line
            if line.startswith(comment_indicators)
            else f"{comment_indicators[0]} {line}".rstrip()
        )
        for line in (line.rstrip("\r") for line in comment.split("\n"))
    ]


@dataclass(slots=True)
class Key:
    """A key holding its value and comment (stored without comment indicators)."""

    name: str
    value: str = ""
    comment: str = ""

    def to_string(self, equal_indicator: str) -> str:
        """Convert the Key into an ini key line.

        Args:
            equal_indicator (str): The delimiter between key and value.

        Returns:
            str: The ini string.
        """
        return f"{self.name}{equal_indicator}{self.value}"

    def copy(self) -> Self:
        return type(self)(self.name, self.value, self.comment)


@dataclass(slots=True)
class Section:
    """A named group of keys. The empty name denotes the default section."""

    name: str = DEFAULT_SECTION_NAME
    comment: str = ""
    keys: list[Key] = field(default_factory=list)

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_SECTION_NAME

    def __iter__(self) -> Iterator[Key]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_key(name) is not None

    def find_key(self, name: str) -> int | None:
        """Get the index of the first key matching name (case-insensitive).

        Args:
            name (str): The key name to search for.

        Returns:
            int | None: The index of the key or None if no key matches.
        """
        return next(
            (
                idx
                for idx, key in enumerate(self.keys)
                if equals_no_case(key.name, name)
            ),
            None,
        )

    def get_key(self, name: str) -> Key | None:
        idx = self.find_key(name)
        return None if idx is None else self.keys[idx]

    def add_keys(self, keys: Iterable[Key]) -> None:
        """Append copies of keys."""
        self.keys.extend(key.copy() for key in keys)

    def header_string(self) -> str:
        return f"{SECTION_OPEN}{self.name}{SECTION_CLOSE}"
