"""Line-oriented parser building sections and keys from ini text."""

from pathlib import Path
from typing import Iterable
import warnings
from charset_normalizer import from_bytes as read_from_bytes
from .args import Parameters
from .diagnostics import DiagLevel, DiagnosticSink, NullSink
from .entities import Key, Section
from .exceptions_warnings import IoUnavailable, IniStructureWarning
from .globals import DEFAULT_ENCODING, SECTION_OPEN, SECTION_CLOSE
from .utils import equals_no_case, split_key_value, strip_comment_indicators, trim


def read_text(path: str | Path, encoding: str | None = None) -> tuple[str, str]:
    """Read a file's content.

    Args:
        path (str | Path): Path to the file.
        encoding (str | None, optional): Encoding of the file. If None, will detect the
            encoding. Defaults to None.

    Raises:
        IoUnavailable: If the file can't be opened or decoded.

    Returns:
        tuple[str, str]: The file content and the encoding it was decoded with.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise IoUnavailable(f"Unable to open '{path}' for reading.") from e

    if encoding is not None:
        try:
            return raw.decode(encoding), encoding
        except (UnicodeDecodeError, LookupError) as e:
            raise IoUnavailable(f"Unable to decode '{path}' as {encoding}.") from e

    if not raw:
        return "", DEFAULT_ENCODING
    if (best := read_from_bytes(raw).best()) is None:
        raise IoUnavailable(f"Unable to detect the encoding of '{path}'.")
    # ascii files get written back as utf-8 to take any new character
    detected = DEFAULT_ENCODING if best.encoding == "ascii" else best.encoding
    return str(best), detected


class _ReadIni:

    def __init__(
        self,
        lines: Iterable[str],
        parameters: Parameters | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        """Parse ini lines into self.sections. Sections and keys are always created
        while parsing, whatever the auto-create parameters say.

        Args:
            lines (Iterable[str]): The lines to parse (e.g. an open text file).
            parameters (Parameters | None, optional): Parameters holding comment and
                equal indicators. Defaults to None (default Parameters).
            sink (DiagnosticSink | None, optional): Receiver of diagnostic messages.
                Defaults to None (discard).
        """
        self.parameters = parameters or Parameters()
        self.sink = sink or NullSink()

        self.sections: list[Section] = [Section()]
        self.current_section = self.sections[0]
        self.pending_comment: list[str] = []

        self.current_line_index: int = 0
        self.current_line: str = ""

        try:
            for self.current_line_index, line in enumerate(lines, start=1):
                self.current_line = trim(line, self.parameters.equal_indicators)

                if self._is_comment():
                    self.pending_comment.append(
                        strip_comment_indicators(
                            self.current_line, self.parameters.comment_indicators
                        )
                    )

                elif self.current_line.startswith(SECTION_OPEN):
                    self.current_section = self._handle_section_name(
                        self._extract_section_name()
                    )

                elif self.current_line:
                    self._handle_key()
        except OSError as e:
            self.sink(
                DiagLevel.WARN,
                f"[parser] Stopped reading after line {self.current_line_index}: {e}",
            )

        if self.pending_comment:
            self.sink(
                DiagLevel.DEBUG,
                "[parser] Dropping comment at the end of the input because no section"
                " or key follows it.",
            )

    def _is_comment(self) -> bool:
        return self.current_line.startswith(self.parameters.comment_indicators)

    def _take_comment(self) -> str:
        comment = "\n".join(self.pending_comment)
        self.pending_comment = []
        return comment

    def _extract_section_name(self) -> str:
        """Extract the section name between the first '[' and the last ']' of
        self.current_line (or until the end of the line if there's no ']')."""
        name = self.current_line[len(SECTION_OPEN) :]
        if (close := name.rfind(SECTION_CLOSE)) != -1:
            name = name[:close]
        else:
            warnings.warn(
                f"Line {self.current_line_index} misses the closing"
                f" '{SECTION_CLOSE}', taking the rest of the line as section name.",
                IniStructureWarning,
            )
        return name.strip()

    def _handle_section_name(self, name: str) -> Section:
        """Get the section belonging to name, creating it if necessary.

        Args:
            name (str): The extracted section name.

        Returns:
            Section: The section following keys belong to.
        """
        comment = self._take_comment()
        section = next(
            (sec for sec in self.sections if equals_no_case(sec.name, name)), None
        )
        if section is None:
            section = Section(name=name, comment=comment)
            self.sections.append(section)
        else:
            self.sink(
                DiagLevel.INFO,
                f"[parser] Section <{name}> in line {self.current_line_index} already"
                " exists. Merging keys into it.",
            )
            if not section.comment:
                section.comment = comment
        return section

    def _handle_key(self) -> None:
        """Set the key of self.current_line in the current section."""
        name, value = split_key_value(
            self.current_line, self.parameters.equal_indicators
        )
        if not name:
            warnings.warn(
                f"Line {self.current_line_index} is being ignored because its key is"
                " empty.",
                IniStructureWarning,
            )
            return

        comment = self._take_comment()
        if (key := self.current_section.get_key(name)) is not None:
            key.value = value
            key.comment = comment
        else:
            self.current_section.keys.append(Key(name, value, comment))
