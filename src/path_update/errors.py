"""Exceptions raised by path-update."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .conventions import PathConvention
    from .sources import PathSource


class VariableErrorKind(Enum):
    """Why a piece of text is not a variable reference."""

    LENGTH = "length"  # Too short, or the name would be empty
    START_CHAR = "start_char"  # Does not begin with the tag
    END_CHAR = "end_char"  # Paired-tag only: does not end with the tag


class ParseVariableError(ValueError):
    """Text is not a legal variable reference under a convention.

    Raised through one of the kind subclasses below; the base class is what
    callers catch when any kind will do.
    """

    kind: VariableErrorKind | None = None

    def __init__(self, text: str, convention: PathConvention) -> None:
        self.text = text
        self.convention = convention
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{self.text!r} is not a {self.convention.name} environment variable reference"


class VariableLengthError(ParseVariableError):
    """Text is too short, or the name between the tags is empty."""

    kind = VariableErrorKind.LENGTH

    def _describe(self) -> str:
        return (
            "An environment variable reference must be at least "
            f"{self.convention.min_length} characters long"
        )


class VariableStartCharError(ParseVariableError):
    """Text does not begin with the tag character."""

    kind = VariableErrorKind.START_CHAR

    def _describe(self) -> str:
        return f"An environment variable reference must start with {self.convention.tag}"


class VariableEndCharError(ParseVariableError):
    """Paired-tag text does not end with the tag character."""

    kind = VariableErrorKind.END_CHAR

    def _describe(self) -> str:
        return f"An environment variable reference must end with {self.convention.tag}"


class SourceNotImplementedError(NotImplementedError):
    """A path source has no implementation on this platform adapter.

    Raised instead of returning an empty path so callers never mistake a
    missing lookup for a genuinely empty search path.
    """

    def __init__(self, source: PathSource, platform: str, reason: str = "") -> None:
        self.source = source
        self.platform = platform
        self.reason = reason
        message = f"Reading the {source.value} path is not implemented on {platform}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
