from typing import get_args
from .globals import (
    VALID_MARKERS,
    DEFAULT_COMMENT_INDICATORS,
    DEFAULT_EQUAL_INDICATORS,
    SECTION_OPEN,
)


class Parameters:
    """Parameters for reading, writing and mutating documents."""

    NAMES = (
        "comment_indicators",
        "equal_indicators",
        "auto_create_sections",
        "auto_create_keys",
        "encoding",
    )
    """Names of the settable parameters."""

    def __init__(
        self,
        comment_indicators: VALID_MARKERS | tuple[VALID_MARKERS, ...] = (
            DEFAULT_COMMENT_INDICATORS
        ),
        equal_indicators: VALID_MARKERS | tuple[VALID_MARKERS, ...] = (
            DEFAULT_EQUAL_INDICATORS
        ),
        auto_create_sections: bool = True,
        auto_create_keys: bool = True,
        encoding: str | None = None,
    ) -> None:
        """
        Args:
            comment_indicators (VALID_MARKERS | tuple[VALID_MARKERS, ...], optional):
                Character(s) that start a comment line. If multiple are given, the
                first will be taken for writing. Defaults to ";".
            equal_indicators (VALID_MARKERS | tuple[VALID_MARKERS, ...], optional):
                Character(s) that delimit keys from values. If multiple are given,
                the first will be taken for writing. Defaults to "=".
            auto_create_sections (bool, optional): Whether setting a value in a
                missing section creates that section. Defaults to True.
            auto_create_keys (bool, optional): Whether setting a missing key creates
                that key. Defaults to True.
            encoding (str | None, optional): Encoding for reading and writing files.
                If None, the encoding is detected on load and reused on save.
                Defaults to None.
        """
        # because comment_indicators and equal_indicators check each other on setting
        self._comment_indicators: tuple[str, ...] = ()
        self._equal_indicators: tuple[str, ...] = ()

        self.comment_indicators = comment_indicators
        self.equal_indicators = equal_indicators
        self.auto_create_sections = auto_create_sections
        self.auto_create_keys = auto_create_keys
        self.encoding = encoding

    @property
    def comment_indicators(self) -> tuple[VALID_MARKERS, ...]:
        return self._comment_indicators

    @comment_indicators.setter
    def comment_indicators(
        self, value: VALID_MARKERS | tuple[VALID_MARKERS, ...]
    ) -> None:
        value = self._as_tuple(value)
        self.verify_marker(value, "comment indicator")
        self._comment_indicators = value
        self.verify_between_markers()

    @property
    def equal_indicators(self) -> tuple[VALID_MARKERS, ...]:
        return self._equal_indicators

    @equal_indicators.setter
    def equal_indicators(
        self, value: VALID_MARKERS | tuple[VALID_MARKERS, ...]
    ) -> None:
        value = self._as_tuple(value)
        self.verify_marker(value, "equal indicator")
        self._equal_indicators = value
        self.verify_between_markers()

    @property
    def comment_indicator(self) -> str:
        """Indicator used for writing comments."""
        return self._comment_indicators[0]

    @property
    def equal_indicator(self) -> str:
        """Indicator used for writing key lines."""
        return self._equal_indicators[0]

    @staticmethod
    def _as_tuple(value: str | tuple[str, ...]) -> tuple[str, ...]:
        # "=:" is read as two indicators
        return tuple(value)

    def verify_marker(self, marker: tuple[str, ...], name: str) -> None:
        if not marker:
            raise ValueError(f"At least one {name} is required.")
        for val in marker:
            if val == SECTION_OPEN:
                raise ValueError(
                    f"'{SECTION_OPEN}' (section name identifier) is not allowed as a"
                    f" {name}."
                )
            if val not in get_args(VALID_MARKERS):
                raise ValueError(f"'{val}' is not a valid {name}.")

    def verify_between_markers(self) -> None:
        if set(self._comment_indicators).intersection(self._equal_indicators):
            raise ValueError(
                "Comment indicators and equal indicators have to be distinct from each"
                " other."
            )

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs

        Args:
            **kwargs: Keyword-arguments to update the parameters with.

        Raises:
            TypeError: If a keyword isn't the name of a settable parameter.
        """
        for k, v in kwargs.items():
            if k not in self.NAMES:
                raise TypeError(f"Unknown parameter '{k}'.")
            setattr(self, k, v)

    def copy(self) -> "Parameters":
        return Parameters(**{name: getattr(self, name) for name in self.NAMES})
