from inidoc import Document, Parameters, DiagLevel
from uuid import uuid1
from pathlib import Path


class Base:
    """Base for tests. Provides functions for creating an ini content and reading it
    into a Document."""

    def __init__(self, write_parameters: Parameters | None = None) -> None:
        """
        Args:
            write_parameters (Parameters | None, optional): Parameters for creating the
                ini content. Defaults to None (default Parameters).
        """
        self.content: str = ""
        self.write_parameters = write_parameters or Parameters()

    @classmethod
    def random_id(cls) -> str:
        """Create a random UUID1 with underscores instead of hyphens."""
        return str(uuid1()).replace("-", "_")

    def add_section(self, name: str | None = None) -> str:
        """Add a section header.

        Args:
            name (str | None, optional): The section name. If None will generate one.
                Defaults to None.

        Returns:
            str: The section name.
        """
        if name is None:
            name = self.random_id()
        self.content += f"[{name}]\n"
        return name

    def add_key(self, name: str | None = None, value: str | None = None) -> str:
        """Add a key line.

        Returns:
            str: The key name.
        """
        if name is None:
            name = self.random_id()
        if value is None:
            value = self.random_id()
        self.content += f"{name} {self.write_parameters.equal_indicator} {value}\n"
        return name

    def add_comment(self, comment: str | None = None) -> str:
        """Add a comment line.

        Returns:
            str: The comment content.
        """
        if comment is None:
            comment = self.random_id()
        self.content += f"{self.write_parameters.comment_indicator} {comment}\n"
        return comment

    def add_blank(self) -> None:
        self.content += "\n"

    def export(self, path: Path) -> Path:
        """Export the generated ini content.

        Args:
            path (Path): The directory to export to.

        Returns:
            Path: The path of the written file.
        """
        dest = path / f"{self.random_id()}.ini"
        dest.write_text(self.content, encoding="utf-8")
        return dest

    def read(self, path: Path, **kwargs) -> Document:
        """Export the content and load it into a new Document."""
        return Document(self.export(path), **kwargs)


class CollectingSink:
    """Diagnostic sink remembering every message."""

    def __init__(self) -> None:
        self.messages: list[tuple[DiagLevel, str]] = []

    def __call__(self, level: DiagLevel, message: str) -> None:
        self.messages.append((level, message))

    def levels(self) -> list[DiagLevel]:
        return [level for level, _ in self.messages]


SAMPLE = (
    "[UserSettings]\n"
    "Name=Joe User\n"
    "Date of Birth=12/25/01\n"
    "\n"
    ";\n"
    "; Settings unique to this server\n"
    ";\n"
    "[ServerSettings]\n"
    "Port=1200\n"
    "IP_Address=127.0.0.1\n"
    "MachineName=ADMIN\n"
)
"""Ini content in the layout the serializer writes."""
