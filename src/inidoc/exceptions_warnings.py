"""inidoc-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class IniDocumentError(Exception):
    """Base class of all inidoc errors."""


class EntityNotFound(IniDocumentError):
    """Raised when a section or key was to be accessed but doesn't exist."""


class PolicyDenied(IniDocumentError):
    """Raised when a section or key is missing and the auto-create policy forbids
    creating it."""


class DuplicateEntityError(IniDocumentError):
    """Raised when a section is tried to be created that already exists."""


class InvalidEntityError(IniDocumentError, ValueError):
    """Raised when a section or key is tried to be stored whose name or value would
    read back as a different structure."""


class IoUnavailable(IniDocumentError, OSError):
    """Raised when a file can't be opened for reading or writing."""


class NothingToPersist(IniDocumentError):
    """Raised when an empty document is tried to be saved."""


class NoFileNameSet(IniDocumentError):
    """Raised when a document is tried to be saved without a file path."""


class ValueParseError(IniDocumentError, ValueError):
    """Raised when a stored value can't be interpreted as the requested type."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when a line violates the ini structure and is skipped."""
