"""Unit tests for the case folding table."""

from pathlib import Path

import pytest

from caseless.exceptions import FoldTableError
from caseless.fold_table import (
    UNICODE_VERSION,
    FoldEntry,
    FoldTable,
    clear_fold_table_cache,
    get_fold_table,
    interpreter_unicode_version,
    load_fold_table,
    parse_case_folding,
    unicode_version,
)
from caseless.matching import default_caseless_match_str


class TestFoldTableValidation:
    """Tests for FoldTable construction invariants."""

    def test_accepts_sorted_entries(self) -> None:
        """Sorted, unique, changing entries build a table."""
        table = FoldTable(
            [FoldEntry("A", ("a",)), FoldEntry("ß", ("s", "s"))], (1, 0, 0)
        )
        assert len(table) == 2

    def test_rejects_unsorted_entries(self) -> None:
        """Entries out of order abort construction."""
        with pytest.raises(FoldTableError, match="not sorted") as exc_info:
            FoldTable([FoldEntry("B", ("b",)), FoldEntry("A", ("a",))], (1, 0, 0))
        assert exc_info.value.source == ord("A")

    def test_rejects_duplicate_source(self) -> None:
        """A source code point may appear only once."""
        with pytest.raises(FoldTableError, match="duplicate"):
            FoldTable([FoldEntry("A", ("a",)), FoldEntry("A", ("b",))], (1, 0, 0))

    def test_rejects_empty_replacement(self) -> None:
        """A replacement needs at least one code point."""
        with pytest.raises(FoldTableError, match="1 to 3"):
            FoldTable([FoldEntry("A", ())], (1, 0, 0))

    def test_rejects_long_replacement(self) -> None:
        """A replacement has at most three code points."""
        with pytest.raises(FoldTableError, match="got 4"):
            FoldTable([FoldEntry("A", ("a", "b", "c", "d"))], (1, 0, 0))

    def test_rejects_identity_mapping(self) -> None:
        """Only changing mappings belong in the table."""
        with pytest.raises(FoldTableError, match="identity"):
            FoldTable([FoldEntry("a", ("a",))], (1, 0, 0))

    def test_rejects_nul_in_replacement(self) -> None:
        """NUL is not a valid folded code point."""
        with pytest.raises(FoldTableError, match="code point sequence"):
            FoldTable([FoldEntry("A", ("a", "\0"))], (1, 0, 0))

    def test_error_message_names_code_point(self) -> None:
        """The offending code point is formatted into the message."""
        with pytest.raises(FoldTableError, match=r"U\+0041"):
            FoldTable([FoldEntry("A", ("A",))], (1, 0, 0))


class TestFoldTableLookup:
    """Tests for FoldTable lookups and container protocol."""

    def test_lookup_single(self, small_table: FoldTable) -> None:
        """Single code point mappings are returned as a 1-tuple."""
        assert small_table.lookup("A") == ("a",)

    def test_lookup_multiple(self, small_table: FoldTable) -> None:
        """Multi code point mappings keep their order."""
        assert small_table.lookup("ß") == ("s", "s")
        assert small_table.lookup("ﬃ") == ("f", "f", "i")

    def test_lookup_missing(self, small_table: FoldTable) -> None:
        """Unmapped code points return None."""
        assert small_table.lookup("a") is None
        assert small_table.lookup("\U0010ffff") is None
        assert small_table.lookup("\0") is None

    def test_lookup_returns_shared_storage(self, small_table: FoldTable) -> None:
        """Repeated lookups return the same tuple object."""
        assert small_table.lookup("ß") is small_table.lookup("ß")

    def test_contains(self, small_table: FoldTable) -> None:
        """Membership tests only changing code points."""
        assert "A" in small_table
        assert "a" not in small_table
        assert "AB" not in small_table
        assert 65 not in small_table

    def test_iter_yields_entries_in_order(self, small_table: FoldTable) -> None:
        """Iteration yields FoldEntry objects sorted by source."""
        sources = [entry.source for entry in small_table]
        assert sources == ["A", "B", "ß", "ﬃ"]
        assert list(small_table)[2] == FoldEntry("ß", ("s", "s"))

    def test_repr(self, small_table: FoldTable) -> None:
        """repr shows size and version."""
        assert repr(small_table) == "FoldTable(entries=4, unicode_version=15.1.0)"


class TestParseCaseFolding:
    """Tests for parse_case_folding()."""

    def test_keeps_common_and_full_rows(self, sample_case_folding: str) -> None:
        """C and F rows are kept; S and T rows are skipped."""
        table = parse_case_folding(sample_case_folding.splitlines())
        sources = [entry.source for entry in table]
        assert sources == ["A", "B", "I", "ß", "\u1e9e", "ﬃ"]
        assert table.lookup("I") == ("i",)
        assert table.lookup("\u1e9e") == ("s", "s")

    def test_reads_version_header(self, sample_case_folding: str) -> None:
        """The version tuple comes from the first header line."""
        table = parse_case_folding(sample_case_folding.splitlines())
        assert table.unicode_version == (15, 1, 0)

    def test_missing_header(self) -> None:
        """Data without a version header is rejected."""
        with pytest.raises(FoldTableError, match="header"):
            parse_case_folding(["0041; C; 0061; # LATIN CAPITAL LETTER A"])

    def test_too_many_targets(self) -> None:
        """A row with more than three targets is rejected."""
        lines = ["# CaseFolding-1.0.0.txt", "0041; F; 0061 0062 0063 0064; # X"]
        with pytest.raises(FoldTableError, match="4 code points"):
            parse_case_folding(lines)

    def test_bad_hex(self) -> None:
        """Unparseable code points are reported with the line number."""
        lines = ["# CaseFolding-1.0.0.txt", "00ZZ; C; 0061; # X"]
        with pytest.raises(FoldTableError, match="line 2"):
            parse_case_folding(lines)

    def test_missing_fields(self) -> None:
        """Rows with fewer than three fields are rejected."""
        lines = ["# CaseFolding-1.0.0.txt", "0041; C"]
        with pytest.raises(FoldTableError, match="expected 3 fields"):
            parse_case_folding(lines)

    def test_unsorted_rows(self) -> None:
        """Table invariants are enforced on parsed data too."""
        lines = ["# CaseFolding-1.0.0.txt", "0042; C; 0062;", "0041; C; 0061;"]
        with pytest.raises(FoldTableError, match="not sorted"):
            parse_case_folding(lines)


class TestLoadFoldTable:
    """Tests for load_fold_table()."""

    def test_loads_file(self, case_folding_file: Path) -> None:
        """A CaseFolding.txt file on disk is parsed."""
        table = load_fold_table(case_folding_file)
        assert len(table) == 6
        assert table.unicode_version == (15, 1, 0)

    def test_missing_file(self, tmp_path: Path) -> None:
        """An unreadable file raises FoldTableError."""
        with pytest.raises(FoldTableError, match="cannot read"):
            load_fold_table(tmp_path / "missing.txt")


class TestInterpreterTable:
    """Tests for the interpreter-derived default table."""

    def test_common_mappings(self, fold_table: FoldTable) -> None:
        """ASCII, sharp s, ligatures and long s are folded."""
        assert fold_table.lookup("A") == ("a",)
        assert fold_table.lookup("ß") == ("s", "s")
        assert fold_table.lookup("ﬃ") == ("f", "f", "i")
        assert fold_table.lookup("ſ") == ("s",)

    def test_cherokee_folds_to_uppercase(self, fold_table: FoldTable) -> None:
        """Cherokee small letters fold to the capital letters."""
        assert fold_table.lookup("\uab70") == ("\u13a0",)
        assert fold_table.lookup("\u13f8") == ("\u13f0",)
        assert fold_table.lookup("\u13a0") is None

    def test_turkic_mappings_not_used(self, fold_table: FoldTable) -> None:
        """Capital I folds to plain i, not dotless i."""
        assert fold_table.lookup("I") == ("i",)

    def test_matches_str_casefold(self, fold_table: FoldTable) -> None:
        """Every entry agrees with str.casefold()."""
        for entry in fold_table:
            assert "".join(entry.replacement) == entry.source.casefold()

    def test_version(self, fold_table: FoldTable) -> None:
        """The version is the interpreter's Unicode version."""
        assert fold_table.unicode_version == interpreter_unicode_version()
        assert unicode_version() == fold_table.unicode_version

    def test_version_constant(self, fold_table: FoldTable) -> None:
        """UNICODE_VERSION names the default table's data version."""
        assert UNICODE_VERSION == interpreter_unicode_version()
        assert UNICODE_VERSION == fold_table.unicode_version


class TestGetFoldTable:
    """Tests for the cached process-wide table."""

    @pytest.fixture
    def fresh_cache(self):
        """Clear the cached table before and after the test."""
        clear_fold_table_cache()
        yield
        clear_fold_table_cache()

    def test_cached(self, fold_table: FoldTable) -> None:
        """The same table object is returned on every call."""
        assert get_fold_table() is get_fold_table()

    @pytest.mark.usefixtures("fresh_cache")
    def test_uses_configured_file(
        self, monkeypatch: pytest.MonkeyPatch, case_folding_file: Path
    ) -> None:
        """CASELESS_CASE_FOLDING_FILE selects the data file."""
        monkeypatch.setenv("CASELESS_CASE_FOLDING_FILE", str(case_folding_file))
        table = get_fold_table()
        assert len(table) == 6
        assert table.unicode_version == (15, 1, 0)

    @pytest.mark.usefixtures("fresh_cache")
    def test_invalid_logging_setting_does_not_break_folding(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Folding works even when a logging variable is invalid."""
        monkeypatch.setenv("CASELESS_LOG_LEVEL", "verbose")
        monkeypatch.setenv("CASELESS_LOG_FORMAT", "xml")
        assert default_caseless_match_str("A", "a")
        assert len(get_fold_table()) > 1000

    @pytest.mark.usefixtures("fresh_cache")
    def test_uses_config_file_section(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, case_folding_file: Path
    ) -> None:
        """The [caseless] section of the config file selects the data file."""
        config_path = tmp_path / "config.toml"
        config_path.write_text(
            "[caseless]\n"
            f'case_folding_file = "{case_folding_file.as_posix()}"\n'
            "\n"
            "[logging]\n"
            'level = "verbose"\n'
        )
        monkeypatch.setenv("CASELESS_CONFIG_PATH", str(config_path))
        assert len(get_fold_table()) == 6
