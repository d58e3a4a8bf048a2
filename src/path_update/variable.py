"""Environment variable references inside path entries.

A reference is recognised, never expanded:

- single-tag convention: ``$NAME`` (everything after the tag is the name)
- paired-tag convention: ``%NAME%`` (everything between the first and the
  last character is the name)

Names are sliced on code points, so non-ASCII names survive unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .conventions import NATIVE, PathConvention
from .errors import VariableEndCharError, VariableLengthError, VariableStartCharError


@dataclass(frozen=True)
class Variable:
    """A variable name with its tag characters stripped."""

    name: str
    convention: PathConvention = field(default=NATIVE)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Variable name must not be empty")

    def display(self) -> str:
        """Return the reference as it would appear in a path list."""
        return self.convention.wrap(self.name)

    def __str__(self) -> str:
        return self.display()


def parse_variable(text: str, convention: PathConvention = NATIVE) -> Variable:
    """Parse a whole path entry as a variable reference.

    Checks run in a fixed order and the first failing one decides the error:
    too short, wrong first character, wrong last character (paired-tag
    only), empty name.

    Args:
        text: Full text of one path entry
        convention: Tag rules to apply

    Returns:
        The referenced Variable

    Raises:
        VariableLengthError: Text too short or name empty
        VariableStartCharError: Text does not start with the tag
        VariableEndCharError: Paired-tag text does not end with the tag
    """
    if len(text) < (2 if convention.paired else 1):
        raise VariableLengthError(text, convention)

    if text[0] != convention.tag:
        raise VariableStartCharError(text, convention)

    if convention.paired:
        if text[-1] != convention.tag:
            raise VariableEndCharError(text, convention)
        name = text[1:-1]
    else:
        name = text[1:]

    if not name:
        raise VariableLengthError(text, convention)

    return Variable(name=name, convention=convention)
