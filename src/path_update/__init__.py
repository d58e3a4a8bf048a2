"""path-update - parse PATH-style search path values into literal paths and variable references."""

__version__ = "0.1.0"

from .conventions import NATIVE, UNIX, WINDOWS, PathConvention, convention_for
from .errors import (
    ParseVariableError,
    SourceNotImplementedError,
    VariableEndCharError,
    VariableErrorKind,
    VariableLengthError,
    VariableStartCharError,
)
from .path import SearchPath, parse_path
from .path_item import LiteralPath, PathItem, VariableReference, parse_entry
from .sources import PathSource, PlatformAdapter, adapter_for, load_path
from .variable import Variable, parse_variable

__all__ = [
    "LiteralPath",
    "NATIVE",
    "ParseVariableError",
    "PathConvention",
    "PathItem",
    "PathSource",
    "PlatformAdapter",
    "SearchPath",
    "SourceNotImplementedError",
    "UNIX",
    "Variable",
    "VariableEndCharError",
    "VariableErrorKind",
    "VariableLengthError",
    "VariableReference",
    "VariableStartCharError",
    "WINDOWS",
    "adapter_for",
    "convention_for",
    "load_path",
    "parse_entry",
    "parse_path",
    "parse_variable",
]
