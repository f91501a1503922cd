from .interface import Document
from .args import Parameters
from .entities import Key, Section
from .diagnostics import DiagLevel, DiagnosticSink, NullSink, LoggingSink
from .globals import VALID_MARKERS, DEFAULT_SECTION_NAME
from .utils import trim, compare_no_case, split_key_value
from . import exceptions_warnings
