"""Interface classes exist for coder interaction, to simplify the process
behind inidoc."""

import io
from pathlib import Path
from typing import Any, Iterable, Iterator, Self, TextIO
from .args import Parameters
from .diagnostics import DiagLevel, DiagnosticSink, NullSink
from .entities import Key, Section
from .exceptions_warnings import (
    DuplicateEntityError,
    EntityNotFound,
    InvalidEntityError,
    IoUnavailable,
    NoFileNameSet,
    NothingToPersist,
    PolicyDenied,
    ValueParseError,
)
from .globals import (
    DEFAULT_ENCODING,
    DEFAULT_SECTION_NAME,
    LINE_TERMINATORS,
    SECTION_OPEN,
    WHITESPACE,
)
from .parser import _ReadIni, read_text
from .serializer import to_string, write_text
from .type_converters import (
    TypeConverter,
    WrongType,
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_FLOAT_CONVERTER,
    DEFAULT_INT_CONVERTER,
    bool_to_string,
    float_to_string,
    int_to_string,
)
from .utils import copy_doc, equals_no_case

_MISSING: Any = object()


class Document:
    """An ini document: ordered sections holding ordered keys, both with optional
    comments. Section and key names are matched case-insensitively and the empty
    section name selects the default section, which always exists.

    The document is not thread-safe. Serialize access externally if it is shared
    between threads.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        parameters: Parameters | None = None,
        sink: DiagnosticSink | None = None,
        **kwargs,
    ) -> None:
        """If a path is given, it is remembered for saving and loaded if possible.
        A failed load leaves an empty document.

        Args:
            path (str | Path | None, optional): Path of the ini file. Defaults to None.
            parameters (Parameters | None, optional): Parameters for reading, writing
                and mutating, as a Parameters object. Parameters can also be passed
                as kwargs (overriding the ones of the Parameters object).
                Defaults to None.
            sink (DiagnosticSink | None, optional): Receiver of diagnostic messages.
                Defaults to None (discard).
            **kwargs (optional): Parameters as kwargs. See Parameters doc for details.
        """
        parameters = Parameters() if parameters is None else parameters.copy()
        if kwargs:
            parameters.update(**kwargs)
        self.parameters = parameters
        self.sink: DiagnosticSink = sink or NullSink()

        self._sections: list[Section] = [Section()]
        self._file_path: Path | None = None
        self._encoding: str | None = parameters.encoding
        self._dirty = False

        if path is not None:
            self._file_path = Path(path)
            self.load()
            self._dirty = False

    # ----------
    # state
    # ----------

    @property
    def file_path(self) -> Path | None:
        return self._file_path

    @file_path.setter
    def file_path(self, value: str | Path | None) -> None:
        new = None if value is None else Path(value)
        if (
            self._file_path is not None
            and new is not None
            and not equals_no_case(str(self._file_path), str(new))
        ):
            self._dirty = True
            self.sink(
                DiagLevel.WARN,
                f"[Document.file_path] The file path has changed from"
                f" <{self._file_path}> to <{new}>.",
            )
        self._file_path = new

    @property
    def encoding(self) -> str:
        """Encoding used for saving."""
        return self._encoding or DEFAULT_ENCODING

    @property
    def dirty(self) -> bool:
        return self._dirty

    def is_dirty(self) -> bool:
        """Whether the document changed since it was loaded or saved."""
        return self._dirty

    def set_dirty(self, dirty: bool = True) -> None:
        self._dirty = dirty

    def clear(self) -> None:
        """Remove all sections and keys, keeping an empty default section."""
        self._sections = [Section()]
        self._dirty = False

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(tuple(self._sections))

    def __len__(self) -> int:
        return self.section_count()

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.has_section(section)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(file_path={str(self._file_path)!r},"
            f" sections={self.section_count()}, keys={self.key_count()},"
            f" dirty={self._dirty})"
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is None and self._dirty:
            self.save()

    # ----------
    # lookup
    # ----------

    def _find_section(self, section: str) -> int | None:
        return next(
            (
                idx
                for idx, sec in enumerate(self._sections)
                if equals_no_case(sec.name, section)
            ),
            None,
        )

    def _get_section(self, section: str) -> Section:
        """Get a section by its name (case-insensitive).

        Args:
            section (str): The name of the section. "" selects the default section.

        Raises:
            EntityNotFound: If the section doesn't exist.

        Returns:
            Section: The section.
        """
        if (idx := self._find_section(section)) is None:
            raise EntityNotFound(f"Section '{section}' doesn't exist.")
        return self._sections[idx]

    def _get_key(self, key: str, section: str = DEFAULT_SECTION_NAME) -> Key:
        """Get a key by its name and its section's name (both case-insensitive).

        Args:
            key (str): The name of the key.
            section (str, optional): The name of the section. Defaults to "" (default
                section).

        Raises:
            EntityNotFound: If the section or the key doesn't exist.

        Returns:
            Key: The key.
        """
        sec = self._get_section(section)
        if (found := sec.get_key(key)) is None:
            raise EntityNotFound(f"Key '{key}' doesn't exist in section '{section}'.")
        return found

    def get_section(self, section: str) -> Section | None:
        """Get a section by its name or None if it doesn't exist."""
        idx = self._find_section(section)
        return None if idx is None else self._sections[idx]

    def has_section(self, section: str) -> bool:
        return self._find_section(section) is not None

    def has_key(self, key: str, section: str = DEFAULT_SECTION_NAME) -> bool:
        return (sec := self.get_section(section)) is not None and key in sec

    def section_count(self) -> int:
        """Number of sections, the default section included."""
        return len(self._sections)

    def key_count(self) -> int:
        """Number of keys of all sections."""
        return sum(len(sec) for sec in self._sections)

    # ----------
    # typed get
    # ----------

    def get_value(self, key: str, section: str = DEFAULT_SECTION_NAME) -> str | None:
        """Get the value of a key.

        Args:
            key (str): The name of the key (case-insensitive).
            section (str, optional): The name of the section (case-insensitive).
                Defaults to "" (default section).

        Returns:
            str | None: The value or None if the section or key doesn't exist.
        """
        try:
            return self._get_key(key, section).value
        except EntityNotFound:
            return None

    @copy_doc(get_value, annotations=True)
    def get_string(self, *args, **kwargs) -> ...:
        return self.get_value(*args, **kwargs)

    def _get_converted[
        T
    ](
        self,
        key: str,
        section: str,
        type_converter: TypeConverter[T],
        type_name: str,
        default: Any = _MISSING,
    ) -> T | Any:
        """Get the value of a key converted by type_converter.

        Args:
            key (str): The name of the key.
            section (str): The name of the section.
            type_converter (TypeConverter[T]): Converter to apply to the value.
            type_name (str): Name of the requested type for error messages.
            default (Any, optional): Returned if the key doesn't exist or can't be
                converted. If not given, None is returned for a missing key and
                ValueParseError is raised for an inconvertible value.

        Raises:
            ValueParseError: If the value can't be converted and no default is given.

        Returns:
            T | Any: The converted value, the default or None.
        """
        if (value := self.get_value(key, section)) is None:
            return None if default is _MISSING else default
        try:
            return type_converter(value)
        except WrongType as e:
            if default is not _MISSING:
                return default
            raise ValueParseError(
                f"Value '{value}' of key '{key}' in section '{section}' is not"
                f" {type_name}."
            ) from e

    def get_int(
        self, key: str, section: str = DEFAULT_SECTION_NAME, default: Any = _MISSING
    ) -> int | Any:
        """Get the value of a key as an int.

        Args:
            key (str): The name of the key (case-insensitive).
            section (str, optional): The name of the section (case-insensitive).
                Defaults to "" (default section).
            default (Any, optional): Returned if the key doesn't exist or its value
                isn't an int. Defaults to None for a missing key and raising
                ValueParseError for a value that isn't an int.

        Raises:
            ValueParseError: If the value isn't an int and no default is given.

        Returns:
            int | Any: The value, the default or None.
        """
        return self._get_converted(
            key, section, DEFAULT_INT_CONVERTER, "an integer", default
        )

    def get_float(
        self, key: str, section: str = DEFAULT_SECTION_NAME, default: Any = _MISSING
    ) -> float | Any:
        """Get the value of a key as a float. See get_int for details."""
        return self._get_converted(
            key, section, DEFAULT_FLOAT_CONVERTER, "a float", default
        )

    def get_bool(
        self, key: str, section: str = DEFAULT_SECTION_NAME, default: Any = None
    ) -> bool | Any:
        """Get the value of a key as a bool. Values starting with "1" and the values
        "true" and "yes" (case-insensitive) are True, everything else is False.

        Returns:
            bool | Any: The value or default if the key doesn't exist.
        """
        return self._get_converted(
            key, section, DEFAULT_BOOL_CONVERTER, "a bool", default
        )

    def get_section_comment(self, section: str) -> str | None:
        return None if (sec := self.get_section(section)) is None else sec.comment

    def get_key_comment(
        self, key: str, section: str = DEFAULT_SECTION_NAME
    ) -> str | None:
        try:
            return self._get_key(key, section).comment
        except EntityNotFound:
            return None

    # ----------
    # mutation
    # ----------

    def _check_key(self, key: str, value: str) -> None:
        """Check that a key line written from key and value reads back as the same
        key and value.

        Raises:
            InvalidEntityError: If the key is empty, starts with a comment indicator
                or "[", or contains an equal indicator or a line terminator, or if the
                value contains a line terminator.
        """
        if not key.strip(WHITESPACE):
            raise InvalidEntityError("Key names can't be empty.")
        if key.lstrip(WHITESPACE).startswith(
            (*self.parameters.comment_indicators, SECTION_OPEN)
        ):
            raise InvalidEntityError(
                f"Key name '{key}' starts like a comment or a section header."
            )
        if any(char in key for char in self.parameters.equal_indicators):
            raise InvalidEntityError(f"Key name '{key}' contains an equal indicator.")
        if any(char in key or char in value for char in LINE_TERMINATORS):
            raise InvalidEntityError(
                f"Key '{key}' or its value contains a line terminator."
            )

    def _check_section_name(self, section: str) -> None:
        """Raise InvalidEntityError if the section name contains a line terminator."""
        if any(char in section for char in LINE_TERMINATORS):
            raise InvalidEntityError(
                f"Section name {section!r} contains a line terminator."
            )

    def _set_value(
        self,
        key: str,
        value: str,
        comment: str = "",
        section: str = DEFAULT_SECTION_NAME,
        *,
        create_sections: bool | None = None,
        create_keys: bool | None = None,
    ) -> None:
        """Set the value and comment of a key, overwriting an existing key in place.

        Args:
            key (str): The name of the key (case-insensitive).
            value (str): The new value.
            comment (str, optional): The new comment. Defaults to "".
            section (str, optional): The name of the section (case-insensitive).
                Defaults to "" (default section).
            create_sections (bool | None, optional): Whether to create the section if
                it's missing. If None, will use parameters.auto_create_sections.
                Defaults to None.
            create_keys (bool | None, optional): Whether to create the key if it's
                missing. If None, will use parameters.auto_create_keys.
                Defaults to None.

        Raises:
            PolicyDenied: If the section or key is missing and may not be created.
            InvalidEntityError: If the key, its value or a section to create wouldn't
                read back as written.
        """
        self._check_key(key, value)
        if create_sections is None:
            create_sections = self.parameters.auto_create_sections
        if create_keys is None:
            create_keys = self.parameters.auto_create_keys

        sec = self.get_section(section)
        if sec is None:
            if not create_sections:
                raise PolicyDenied(
                    f"Section '{section}' doesn't exist and sections may not be"
                    " created."
                )
            if not create_keys:
                raise PolicyDenied(
                    f"Key '{key}' doesn't exist in section '{section}' and keys may not"
                    " be created."
                )
            sec = self._create_section(section)

        if (found := sec.get_key(key)) is not None:
            found.value = value
            found.comment = comment
        elif create_keys:
            sec.keys.append(Key(key, value, comment))
        else:
            raise PolicyDenied(
                f"Key '{key}' doesn't exist in section '{section}' and keys may not be"
                " created."
            )
        self._dirty = True

    def set_value(
        self,
        key: str,
        value: str,
        comment: str = "",
        section: str = DEFAULT_SECTION_NAME,
    ) -> bool:
        """Set the value and comment of a key. A missing section or key is created if
        the respective auto-create parameter allows it.

        Args:
            key (str): The name of the key (case-insensitive).
            value (str): The new value.
            comment (str, optional): The new comment. Defaults to "".
            section (str, optional): The name of the section (case-insensitive).
                Defaults to "" (default section).

        Returns:
            bool: Whether the value was set.
        """
        try:
            self._set_value(key, value, comment, section)
        except (PolicyDenied, InvalidEntityError) as e:
            self.sink(DiagLevel.DEBUG, f"[Document.set_value] {e}")
            return False
        return True

    def set_int(
        self,
        key: str,
        value: int,
        comment: str = "",
        section: str = DEFAULT_SECTION_NAME,
    ) -> bool:
        """Set an int value. See set_value for details."""
        return self.set_value(key, int_to_string(value), comment, section)

    def set_float(
        self,
        key: str,
        value: float,
        comment: str = "",
        section: str = DEFAULT_SECTION_NAME,
    ) -> bool:
        """Set a float value (formatted like "%g"). See set_value for details."""
        return self.set_value(key, float_to_string(value), comment, section)

    def set_bool(
        self,
        key: str,
        value: bool,
        comment: str = "",
        section: str = DEFAULT_SECTION_NAME,
    ) -> bool:
        """Set a bool value ("True" or "False"). See set_value for details."""
        return self.set_value(key, bool_to_string(value), comment, section)

    def create_key(
        self,
        key: str,
        value: str,
        comment: str = "",
        section: str = DEFAULT_SECTION_NAME,
    ) -> bool:
        """Like set_value, but creates a missing key regardless of
        parameters.auto_create_keys."""
        try:
            self._set_value(key, value, comment, section, create_keys=True)
        except (PolicyDenied, InvalidEntityError) as e:
            self.sink(DiagLevel.DEBUG, f"[Document.create_key] {e}")
            return False
        return True

    def _create_section(
        self, section: str, comment: str = "", keys: Iterable[Key] | None = None
    ) -> Section:
        """Append a new section.

        Args:
            section (str): The name of the new section.
            comment (str, optional): The comment of the new section. Defaults to "".
            keys (Iterable[Key] | None, optional): Keys to copy into the new section.
                Defaults to None.

        Raises:
            DuplicateEntityError: If a section with that name (case-insensitive)
                exists already.
            InvalidEntityError: If the section name or one of the keys wouldn't read
                back as written.

        Returns:
            Section: The new section.
        """
        if self.has_section(section):
            raise DuplicateEntityError(f"Section <{section}> already exists.")
        self._check_section_name(section)
        keys = [] if keys is None else list(keys)
        for key in keys:
            self._check_key(key.name, key.value)
        sec = Section(name=section, comment=comment)
        sec.add_keys(keys)
        self._sections.append(sec)
        self._dirty = True
        return sec

    def create_section(
        self, section: str, comment: str = "", keys: Iterable[Key] | None = None
    ) -> bool:
        """Create a new section. An existing section is never overwritten.

        Args:
            section (str): The name of the new section.
            comment (str, optional): The comment of the new section. Defaults to "".
            keys (Iterable[Key] | None, optional): Keys to copy into the new section.
                Defaults to None.

        Returns:
            bool: Whether the section was created.
        """
        try:
            self._create_section(section, comment, keys)
        except DuplicateEntityError as e:
            self.sink(DiagLevel.INFO, f"[Document.create_section] {e} Aborting.")
            return False
        except InvalidEntityError as e:
            self.sink(DiagLevel.DEBUG, f"[Document.create_section] {e}")
            return False
        return True

    def delete_section(self, section: str) -> bool:
        """Delete a section and its keys. The default section can't be deleted.

        Returns:
            bool: Whether a section was deleted.
        """
        idx = self._find_section(section)
        if idx is None or self._sections[idx].is_default:
            return False
        del self._sections[idx]
        self._dirty = True
        return True

    def delete_key(self, key: str, section: str = DEFAULT_SECTION_NAME) -> bool:
        """Delete the first key matching key (case-insensitive) in section.

        Returns:
            bool: Whether a key was deleted.
        """
        if (sec := self.get_section(section)) is None:
            return False
        if (idx := sec.find_key(key)) is None:
            return False
        del sec.keys[idx]
        self._dirty = True
        return True

    def set_section_comment(self, section: str, comment: str) -> bool:
        """Replace the comment of a section.

        Returns:
            bool: Whether the section exists.
        """
        try:
            self._get_section(section).comment = comment
        except EntityNotFound:
            return False
        self._dirty = True
        return True

    def set_key_comment(
        self, key: str, comment: str, section: str = DEFAULT_SECTION_NAME
    ) -> bool:
        """Replace the comment of a key.

        Returns:
            bool: Whether the key exists.
        """
        try:
            self._get_key(key, section).comment = comment
        except EntityNotFound:
            return False
        self._dirty = True
        return True

    # ----------
    # reading and writing
    # ----------

    def _replace_content(self, parsed: _ReadIni) -> None:
        self._sections = parsed.sections
        self._dirty = False

    def _load(self, path: str | Path | None = None) -> None:
        """Replace the content with the content of an ini file.

        Args:
            path (str | Path | None, optional): Path of the ini file. If given, it is
                remembered for saving. If None, will use file_path. Defaults to None.

        Raises:
            NoFileNameSet: If no path is given and file_path isn't set.
            IoUnavailable: If the file can't be read.
        """
        if path is None:
            if self._file_path is None:
                raise NoFileNameSet("No file path has been set.")
            path = self._file_path
        text, detected = read_text(path, self.parameters.encoding)
        self._replace_content(
            _ReadIni(io.StringIO(text), parameters=self.parameters, sink=self.sink)
        )
        self._file_path = Path(path)
        self._encoding = detected

    def load(self, path: str | Path | None = None) -> bool:
        """Replace the content with the content of an ini file. Malformed lines are
        skipped.

        Args:
            path (str | Path | None, optional): Path of the ini file. If given, it is
                remembered for saving. If None, will use file_path. Defaults to None.

        Returns:
            bool: Whether the file could be read.
        """
        try:
            self._load(path)
        except NoFileNameSet as e:
            self.sink(DiagLevel.ERROR, f"[Document.load] {e}")
            return False
        except IoUnavailable as e:
            self.sink(DiagLevel.INFO, f"[Document.load] {e} Does it exist?")
            return False
        return True

    def load_stream(self, stream: TextIO | Iterable[str]) -> bool:
        """Replace the content with the content read from an open text stream."""
        self._replace_content(
            _ReadIni(stream, parameters=self.parameters, sink=self.sink)
        )
        return True

    def loads(self, text: str) -> bool:
        """Replace the content with the content of an ini string."""
        return self.load_stream(io.StringIO(text))

    def dumps(self) -> str:
        """Convert the document into ini text."""
        return to_string(self._sections, self.parameters)

    def _is_empty(self) -> bool:
        return (
            self.key_count() == 0
            and self.section_count() == 1
            and not self._sections[0].comment.strip()
        )

    def _save(self, path: str | Path | None = None) -> None:
        """Write the whole document to its file, replacing the file's content.

        Args:
            path (str | Path | None, optional): New file path to save to. If None, will
                use file_path. Defaults to None.

        Raises:
            NothingToPersist: If the document holds neither keys nor named sections.
            NoFileNameSet: If no path is given and file_path isn't set.
            IoUnavailable: If the file can't be written.
        """
        if self._is_empty():
            raise NothingToPersist("Nothing to save.")
        if path is not None:
            self.file_path = path
        if self._file_path is None:
            raise NoFileNameSet("No file path has been set.")
        write_text(self._file_path, self.dumps(), self.encoding)
        self._dirty = False

    def save(self, path: str | Path | None = None) -> bool:
        """Write the whole document to its file, replacing the file's content.

        Args:
            path (str | Path | None, optional): New file path to save to. If None, will
                use file_path. Defaults to None.

        Returns:
            bool: Whether the document was saved.
        """
        try:
            self._save(path)
        except NothingToPersist as e:
            self.sink(DiagLevel.INFO, f"[Document.save] {e}")
            return False
        except (NoFileNameSet, IoUnavailable) as e:
            self.sink(DiagLevel.ERROR, f"[Document.save] {e}")
            return False
        return True
