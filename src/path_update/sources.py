"""Where search path values come from.

Only the current process environment is implemented. The per-user,
shell-initialisation and machine-wide values are declared on every platform
adapter but raise SourceNotImplementedError until someone builds them:

- Windows keeps user and system PATH values in the registry.
- Unix-like systems have no per-user environment; the closest thing is the
  PATH a login shell ends up with after reading its startup files.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from enum import Enum

from .conventions import NATIVE, UNIX, WINDOWS, PathConvention
from .errors import SourceNotImplementedError
from .logging_config import get_logger
from .path import Environ, SearchPath

logger = get_logger("sources")

PATH_VARIABLE = "PATH"


class PathSource(Enum):
    """Places a search path can be read from."""

    PROCESS = "process"  # Environment of the running process
    USER = "user"  # Value new processes of the current user start with
    SHELL = "shell"  # Value a shell builds while initialising
    SYSTEM = "system"  # Machine-wide value


def _lossy_text(value: str | bytes) -> str:
    """Turn an environment value that is not valid text into a best-effort string.

    os.environ smuggles undecodable bytes through as lone surrogates and
    os.environb hands back raw bytes; both come back with U+FFFD in place
    of the bad bytes. Windows values are UTF-16 and may hold any unpaired
    surrogate, each of which becomes a single U+FFFD.
    """
    encoding = sys.getfilesystemencoding()
    if isinstance(value, bytes):
        return value.decode(encoding, errors="replace")
    try:
        return value.encode(encoding, errors="surrogateescape").decode(encoding, errors="replace")
    except UnicodeEncodeError:
        return value.encode("utf-16-le", errors="surrogatepass").decode("utf-16-le", errors="replace")


def _is_valid_text(value: str | bytes) -> bool:
    if isinstance(value, bytes):
        try:
            value.decode(sys.getfilesystemencoding())
        except UnicodeDecodeError:
            return False
        return True
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def read_process_value(
    name: str = PATH_VARIABLE,
    environ: Environ | None = None,
) -> str:
    """Read one variable from the process environment as text.

    Args:
        name: Variable to read
        environ: Mapping to read from (defaults to os.environ); a bytes
            mapping such as os.environb is accepted too

    Returns:
        The stored value, "" when the variable is unset, or a lossy
        reconstruction when the stored value is not valid text
    """
    if environ is None:
        environ = os.environ

    key: str | bytes = name
    if environ and isinstance(next(iter(environ)), bytes):
        key = os.fsencode(name)

    value = environ.get(key)  # type: ignore[call-overload]
    if value is None:
        logger.debug(f"{name} is not set, treating as empty")
        return ""

    logger.trace(f"Raw {name} value: {value!r}")  # type: ignore[attr-defined]
    if _is_valid_text(value):
        return value.decode(sys.getfilesystemencoding()) if isinstance(value, bytes) else value

    logger.warning(f"{name} is not valid text, undecodable bytes were replaced")
    return _lossy_text(value)


class PlatformAdapter:
    """Reads search path values for one platform family.

    Subclasses list the sources they implement in ``supported_sources`` and
    override the matching ``read_*`` method. Every other source raises
    SourceNotImplementedError.
    """

    name = "generic"
    convention: PathConvention = NATIVE
    supported_sources: frozenset[PathSource] = frozenset({PathSource.PROCESS})

    # Explanations shown when an unsupported source is requested
    unsupported_reasons: Mapping[PathSource, str] = {}

    def supports(self, source: PathSource) -> bool:
        """Return True if this adapter can read the given source."""
        return source in self.supported_sources

    def _unsupported(self, source: PathSource) -> SourceNotImplementedError:
        return SourceNotImplementedError(
            source, self.name, self.unsupported_reasons.get(source, "")
        )

    def read_process(
        self,
        environ: Environ | None = None,
        variable: str = PATH_VARIABLE,
    ) -> str:
        return read_process_value(variable, environ)

    def read_user(self) -> str:
        raise self._unsupported(PathSource.USER)

    def read_shell(self, shell: str | None = None) -> str:
        raise self._unsupported(PathSource.SHELL)

    def read_system(self) -> str:
        raise self._unsupported(PathSource.SYSTEM)

    def read(
        self,
        source: PathSource,
        environ: Environ | None = None,
        shell: str | None = None,
        variable: str = PATH_VARIABLE,
    ) -> str:
        """Read the raw path-list string for a source.

        Raises:
            SourceNotImplementedError: The source is not supported here
        """
        if not self.supports(source):
            raise self._unsupported(source)

        logger.debug(f"Reading {variable} from the {source.value} source ({self.name})")
        if source is PathSource.PROCESS:
            return self.read_process(environ, variable)
        if source is PathSource.USER:
            return self.read_user()
        if source is PathSource.SHELL:
            return self.read_shell(shell)
        return self.read_system()

    def load(
        self,
        source: PathSource,
        environ: Environ | None = None,
        shell: str | None = None,
        variable: str = PATH_VARIABLE,
    ) -> SearchPath:
        """Read a source and parse it with this adapter's convention."""
        text = self.read(source, environ=environ, shell=shell, variable=variable)
        path = SearchPath.parse(text, self.convention)
        logger.debug(f"Parsed {len(path)} entries ({len(path.variables)} variable references)")
        return path


class PosixAdapter(PlatformAdapter):
    name = "posix"
    convention = UNIX
    unsupported_reasons = {
        PathSource.USER: "Unix-like systems have no per-user environment, "
        "use the shell source instead",
        PathSource.SHELL: "running a shell to capture its startup PATH is not supported yet",
        PathSource.SYSTEM: "there is no single machine-wide PATH to read",
    }


class WindowsAdapter(PlatformAdapter):
    name = "windows"
    convention = WINDOWS
    unsupported_reasons = {
        PathSource.USER: "reading the user PATH from the registry is not supported yet",
        PathSource.SHELL: "reading the PATH of a shell is not supported yet",
        PathSource.SYSTEM: "reading the system PATH from the registry is not supported yet",
    }


def adapter_for(convention: PathConvention = NATIVE) -> PlatformAdapter:
    """Return the adapter whose convention matches."""
    if convention == WINDOWS:
        return WindowsAdapter()
    return PosixAdapter()


def load_path(
    source: PathSource = PathSource.PROCESS,
    adapter: PlatformAdapter | None = None,
    environ: Environ | None = None,
    shell: str | None = None,
    variable: str = PATH_VARIABLE,
) -> SearchPath:
    """Read and parse a search path.

    Args:
        source: Which value to read
        adapter: Platform adapter (defaults to the native one)
        environ: Environment mapping for the process source
        shell: Shell name for the shell source
        variable: Name of the variable holding the path list

    Returns:
        Parsed SearchPath

    Raises:
        SourceNotImplementedError: The adapter cannot read that source
    """
    if adapter is None:
        adapter = adapter_for(NATIVE)
    return adapter.load(source, environ=environ, shell=shell, variable=variable)
