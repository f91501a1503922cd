"""Writer converting sections and keys back into ini text."""

from pathlib import Path
from typing import Iterable
from .args import Parameters
from .entities import Section, comment_to_lines
from .exceptions_warnings import IoUnavailable


def to_lines(sections: Iterable[Section], parameters: Parameters) -> list[str]:
    """Convert sections into ini lines (without line terminators).

    A comment is preceded by a blank line. A section header is preceded by a blank
    line unless its comment was just written. Keys with an empty name are skipped.

    Args:
        sections (Iterable[Section]): The sections in the order to write them.
        parameters (Parameters): Parameters holding comment and equal indicators.

    Returns:
        list[str]: The ini lines.
    """
    out: list[str] = []
    comment_indicators = parameters.comment_indicators
    equal_indicator = parameters.equal_indicator

    for section in sections:
        wrote_comment = False

        if comment := comment_to_lines(section.comment, comment_indicators):
            out.append("")
            out.extend(comment)
            wrote_comment = True

        if not section.is_default:
            if not wrote_comment:
                out.append("")
            out.append(section.header_string())

        for key in section:
            if not key.name:
                continue
            if comment := comment_to_lines(key.comment, comment_indicators):
                out.append("")
                out.extend(comment)
            out.append(key.to_string(equal_indicator))

    # no blank line at the very top of the file
    if out and out[0] == "":
        del out[0]

    return out


def to_string(sections: Iterable[Section], parameters: Parameters) -> str:
    """Convert sections into ini text. Every line ends with exactly one "\\n"."""
    return "".join(
        line.rstrip("\r\n") + "\n" for line in to_lines(sections, parameters)
    )


def write_text(path: str | Path, text: str, encoding: str) -> None:
    """Replace a file's content with text.

    Args:
        path (str | Path): Path to the file.
        text (str): The new content.
        encoding (str): Encoding to write with.

    Raises:
        IoUnavailable: If the text can't be encoded or the file can't be opened for
            writing. The file is left untouched if the text can't be encoded.
    """
    try:
        data = text.encode(encoding)
    except (UnicodeEncodeError, LookupError) as e:
        raise IoUnavailable(f"Unable to encode the content as {encoding}.") from e
    try:
        with open(path, "wb") as fp:
            fp.write(data)
    except OSError as e:
        raise IoUnavailable(f"Unable to open '{path}' for writing.") from e
