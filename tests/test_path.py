"""Tests for search path parsing."""

from __future__ import annotations

import pytest

from path_update.conventions import NATIVE, UNIX, WINDOWS
from path_update.errors import SourceNotImplementedError
from path_update.path import SearchPath, parse_path
from path_update.path_item import LiteralPath, VariableReference
from path_update.sources import PosixAdapter, WindowsAdapter
from path_update.variable import Variable


class TestParsePath:
    """Tests for parse_path function."""

    @pytest.mark.parametrize("convention", [UNIX, WINDOWS], ids=["unix", "windows"])
    def test_empty_path(self, convention) -> None:
        """Empty input gives no entries, not one empty entry."""
        path = parse_path("", convention)
        assert len(path) == 0
        assert list(path) == []

    def test_one_item_unix(self) -> None:
        """A single path gives a single literal entry."""
        path = parse_path("/usr/bin", UNIX)
        assert len(path) == 1
        assert path[0] == LiteralPath("/usr/bin")

    def test_one_item_windows(self) -> None:
        """A single Windows path gives a single literal entry."""
        path = parse_path("C:\\Users\\someone\\source\\path-update", WINDOWS)
        assert list(path) == [LiteralPath("C:\\Users\\someone\\source\\path-update")]

    def test_order_preserved(self) -> None:
        """Entries come back in input order."""
        path = parse_path("/usr/bin:/usr/local/bin", UNIX)
        assert list(path) == [LiteralPath("/usr/bin"), LiteralPath("/usr/local/bin")]

    def test_mixed_unix(self) -> None:
        """Variables and literals can be mixed."""
        path = parse_path("$HOME:/bin:$変数", UNIX)
        assert list(path) == [
            VariableReference(Variable("HOME", UNIX)),
            LiteralPath("/bin"),
            VariableReference(Variable("変数", UNIX)),
        ]

    def test_mixed_windows(self) -> None:
        """Windows separator and paired tags are honoured."""
        path = parse_path("%SystemRoot%\\system32;%SystemRoot%;C:\\Tools;%PATH%", WINDOWS)
        assert [item.display() for item in path] == [
            "%SystemRoot%\\system32",
            "%SystemRoot%",
            "C:\\Tools",
            "%PATH%",
        ]
        assert [v.name for v in path.variables] == ["SystemRoot", "PATH"]

    def test_colon_is_not_windows_separator(self) -> None:
        """Drive letters survive because ; is the Windows separator."""
        path = parse_path("C:\\bin", WINDOWS)
        assert len(path) == 1

    def test_adjacent_separators_keep_empty_entries(self) -> None:
        """a::b gives an empty literal entry in the middle."""
        path = parse_path("a::b", UNIX)
        assert list(path) == [LiteralPath("a"), LiteralPath(""), LiteralPath("b")]

    def test_leading_and_trailing_separators(self) -> None:
        """Leading and trailing separators produce empty entries too."""
        path = parse_path(";C:\\bin;", WINDOWS)
        assert list(path) == [LiteralPath(""), LiteralPath("C:\\bin"), LiteralPath("")]

    def test_separator_only(self) -> None:
        """A lone separator is two empty entries."""
        assert list(parse_path(":", UNIX)) == [LiteralPath(""), LiteralPath("")]

    def test_bare_tag_entry_is_literal(self) -> None:
        """A lone tag entry is a literal path."""
        path = parse_path("/bin:$", UNIX)
        assert path[1] == LiteralPath("$")

    def test_count_matches_segments(self) -> None:
        """Entry count equals the number of separator-delimited segments."""
        text = "/a:/b:$C:/d:"
        assert len(parse_path(text, UNIX)) == len(text.split(":"))

    def test_default_convention_is_native(self) -> None:
        """Without a convention, the native one is used."""
        assert parse_path("x").convention == NATIVE


class TestSearchPath:
    """Tests for the SearchPath value."""

    def test_parse_classmethod_matches_function(self) -> None:
        """SearchPath.parse and parse_path agree."""
        assert SearchPath.parse("/a:$B", UNIX) == parse_path("/a:$B", UNIX)

    def test_is_immutable(self) -> None:
        """Entries can't be reassigned."""
        path = parse_path("/a", UNIX)
        with pytest.raises(AttributeError):
            path.entries = ()  # type: ignore[misc]

    def test_entries_are_tuple(self) -> None:
        """Entries are stored as a tuple."""
        assert isinstance(parse_path("/a:/b", UNIX).entries, tuple)

    def test_variables_empty_for_literal_path(self) -> None:
        """No variable references gives an empty list."""
        assert parse_path("/a:/b", UNIX).variables == []


class TestSources:
    """Tests for the SearchPath source constructors."""

    def test_for_process_reads_environ(self) -> None:
        """for_process parses the PATH of the given environment."""
        path = SearchPath.for_process({"PATH": "/usr/bin:$HOME"}, adapter=PosixAdapter())
        assert list(path) == [LiteralPath("/usr/bin"), VariableReference(Variable("HOME", UNIX))]

    def test_for_process_missing_path(self) -> None:
        """A missing PATH is an empty path."""
        path = SearchPath.for_process({}, adapter=WindowsAdapter())
        assert len(path) == 0
        assert path.convention == WINDOWS

    def test_for_user_not_implemented(self) -> None:
        """User lookup must fail loudly."""
        with pytest.raises(SourceNotImplementedError):
            SearchPath.for_user(adapter=WindowsAdapter())

    def test_for_shell_not_implemented(self) -> None:
        """Shell lookup must fail loudly."""
        with pytest.raises(NotImplementedError):
            SearchPath.for_shell("bash", adapter=PosixAdapter())

    def test_for_system_not_implemented(self) -> None:
        """System lookup must fail loudly."""
        with pytest.raises(SourceNotImplementedError):
            SearchPath.for_system()
