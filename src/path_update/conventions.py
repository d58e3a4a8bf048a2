"""Platform conventions for search path values.

A convention bundles the three things that differ between platform families
when reading a PATH-style value:

- the entry separator (``:`` or ``;``)
- the variable tag character (``$`` or ``%``)
- whether a reference is closed by a second tag (``%NAME%``) or not (``$NAME``)

Parsing functions take a convention explicitly, so both behaviours can be
exercised from one process regardless of the host platform.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PathConvention:
    """Separator and variable-tag rules for one platform family."""

    name: str
    separator: str
    tag: str
    paired: bool = False  # True when a reference must also end with the tag

    @property
    def min_length(self) -> int:
        """Shortest text that can hold a legal variable reference."""
        return 3 if self.paired else 2

    def wrap(self, name: str) -> str:
        """Return the display form of a variable name, e.g. ``$HOME``."""
        if self.paired:
            return f"{self.tag}{name}{self.tag}"
        return f"{self.tag}{name}"


UNIX = PathConvention(name="unix", separator=":", tag="$", paired=False)
WINDOWS = PathConvention(name="windows", separator=";", tag="%", paired=True)

NATIVE = WINDOWS if os.name == "nt" else UNIX

CONVENTIONS = {
    "unix": UNIX,
    "windows": WINDOWS,
}


def convention_for(name: str) -> PathConvention:
    """Resolve a convention by name.

    Args:
        name: "unix", "windows" or "native" (case-insensitive)

    Returns:
        The matching PathConvention

    Raises:
        ValueError: If the name is not a known convention
    """
    key = name.lower()
    if key == "native":
        return NATIVE
    if key not in CONVENTIONS:
        raise ValueError(
            f"Invalid platform: {name}. Must be one of {('native', *CONVENTIONS)}"
        )
    return CONVENTIONS[key]
