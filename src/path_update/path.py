"""Search path parsing.

A search path is split on the convention's separator and every piece is
classified independently. Nothing is filtered: leading, trailing and
doubled separators produce empty literal entries, and the order of the
entries is the search order.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from .conventions import NATIVE, PathConvention
from .path_item import PathItem, VariableReference, parse_entry

if TYPE_CHECKING:
    from .sources import PlatformAdapter
    from .variable import Variable

Environ = Union[Mapping[str, str], Mapping[bytes, bytes]]


@dataclass(frozen=True)
class SearchPath:
    """An ordered, immutable list of path entries."""

    entries: tuple[PathItem, ...] = ()
    convention: PathConvention = field(default=NATIVE)

    @classmethod
    def parse(cls, text: str, convention: PathConvention = NATIVE) -> SearchPath:
        """Parse a raw path-list string. Never fails."""
        if not text:
            return cls((), convention)
        parts = text.split(convention.separator)
        return cls(tuple(parse_entry(part, convention) for part in parts), convention)

    @classmethod
    def for_process(
        cls,
        environ: Environ | None = None,
        adapter: PlatformAdapter | None = None,
    ) -> SearchPath:
        """Parse the path visible to the current process right now."""
        from .sources import PathSource

        return _resolve_adapter(adapter).load(PathSource.PROCESS, environ=environ)

    @classmethod
    def for_user(cls, adapter: PlatformAdapter | None = None) -> SearchPath:
        """Parse the path a new process of the current user starts with.

        Raises:
            SourceNotImplementedError: The adapter has no user lookup
        """
        from .sources import PathSource

        return _resolve_adapter(adapter).load(PathSource.USER)

    @classmethod
    def for_shell(
        cls, shell: str | None = None, adapter: PlatformAdapter | None = None
    ) -> SearchPath:
        """Parse the path a shell sets up during initialisation.

        Raises:
            SourceNotImplementedError: The adapter has no shell lookup
        """
        from .sources import PathSource

        return _resolve_adapter(adapter).load(PathSource.SHELL, shell=shell)

    @classmethod
    def for_system(cls, adapter: PlatformAdapter | None = None) -> SearchPath:
        """Parse the machine-wide path.

        Raises:
            SourceNotImplementedError: The adapter has no system lookup
        """
        from .sources import PathSource

        return _resolve_adapter(adapter).load(PathSource.SYSTEM)

    @property
    def variables(self) -> list[Variable]:
        """Variables referenced by the path, in search order."""
        return [e.variable for e in self.entries if isinstance(e, VariableReference)]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PathItem]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> PathItem:
        return self.entries[index]


def _resolve_adapter(adapter: PlatformAdapter | None) -> PlatformAdapter:
    # sources builds SearchPath values, so it can only be imported lazily here
    from .sources import adapter_for

    return adapter if adapter is not None else adapter_for(NATIVE)


def parse_path(text: str, convention: PathConvention = NATIVE) -> SearchPath:
    """Split a path-list string into classified entries.

    Args:
        text: Raw value, e.g. the contents of PATH
        convention: Separator and tag rules to apply

    Returns:
        SearchPath with one entry per separator-delimited segment, or no
        entries at all for an empty string
    """
    return SearchPath.parse(text, convention)
