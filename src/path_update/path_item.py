"""Classification of a single search path entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .conventions import NATIVE, PathConvention
from .errors import ParseVariableError
from .variable import Variable, parse_variable


@dataclass(frozen=True)
class LiteralPath:
    """An entry that is a filesystem path, stored exactly as written."""

    text: str

    is_variable = False

    def display(self) -> str:
        return self.text


@dataclass(frozen=True)
class VariableReference:
    """An entry that names an environment variable to be expanded later."""

    variable: Variable

    is_variable = True

    @property
    def name(self) -> str:
        return self.variable.name

    def display(self) -> str:
        return self.variable.display()


PathItem = Union[LiteralPath, VariableReference]


def parse_entry(text: str, convention: PathConvention = NATIVE) -> PathItem:
    """Classify one path entry.

    Anything that parses as a variable reference is one; everything else,
    including the empty string and a lone tag character, is a literal path.

    Args:
        text: Entry text between two separators
        convention: Tag rules to apply

    Returns:
        VariableReference or LiteralPath
    """
    try:
        return VariableReference(parse_variable(text, convention))
    except ParseVariableError:
        return LiteralPath(text)
