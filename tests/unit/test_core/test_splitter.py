"""Tests for the quote-aware statement splitter."""

import pytest

from sqlevents.core.splitter import iter_statements, split_statements


class TestBasicSplitting:
    """Test splitting on statement terminators."""

    def test_simple_statements(self) -> None:
        """Test splitting simple statements."""
        script = """
        CREATE TABLE users (id INT);
        INSERT INTO users (id) VALUES (1);
        SELECT * FROM users;
        """

        statements = split_statements(script)
        assert statements == [
            "CREATE TABLE users (id INT)",
            "INSERT INTO users (id) VALUES (1)",
            "SELECT * FROM users",
        ]

    def test_trailing_statement_without_terminator(self) -> None:
        """Test that a final statement without ``;`` is kept."""
        assert split_statements("SELECT 1; SELECT 2") == ["SELECT 1", "SELECT 2"]

    @pytest.mark.parametrize("script", ["", "   ", ";", ";;;", " ; \n ; \t"])
    def test_empty_input_yields_nothing(self, script: str) -> None:
        """Test that blank scripts and bare terminators produce no statements."""
        assert split_statements(script) == []

    def test_statements_are_trimmed(self) -> None:
        """Test whitespace around statements is removed."""
        assert split_statements("\n\t  SELECT 1  \n;  ") == ["SELECT 1"]

    def test_iter_statements_is_lazy(self) -> None:
        """Test the generator form yields the same statements."""
        iterator = iter_statements("SELECT 1; SELECT 2;")
        assert next(iterator) == "SELECT 1"
        assert list(iterator) == ["SELECT 2"]


class TestQuotedLiterals:
    """Test semicolons and quotes inside string literals."""

    def test_semicolon_in_single_quoted_string(self) -> None:
        """Test a semicolon inside a value does not split the statement."""
        script = "CREATE TABLE messages (c TEXT); INSERT INTO messages VALUES ('Hello; World');"

        statements = split_statements(script)
        assert len(statements) == 2
        assert statements[1] == "INSERT INTO messages VALUES ('Hello; World')"

    def test_semicolon_in_double_quoted_identifier(self) -> None:
        """Test a semicolon inside a double-quoted identifier does not split."""
        assert split_statements('SELECT "odd;name" FROM t; SELECT 2') == ['SELECT "odd;name" FROM t', "SELECT 2"]

    def test_doubled_single_quote_is_escaped(self) -> None:
        """Test ``''`` keeps the literal open."""
        script = "INSERT INTO people VALUES ('O''Brien; Jr'); SELECT 1"

        statements = split_statements(script)
        assert statements == ["INSERT INTO people VALUES ('O''Brien; Jr')", "SELECT 1"]

    def test_doubled_double_quote_is_escaped(self) -> None:
        """Test ``""`` keeps a quoted identifier open."""
        script = 'CREATE TABLE "user""s;x" (id INT); SELECT 1'

        statements = split_statements(script)
        assert statements == ['CREATE TABLE "user""s;x" (id INT)', "SELECT 1"]

    def test_other_quote_inside_string_is_literal(self) -> None:
        """Test a double quote inside a single-quoted string does not toggle state."""
        script = """INSERT INTO t VALUES ('say "hi"; bye'); SELECT 1"""

        statements = split_statements(script)
        assert statements == ["""INSERT INTO t VALUES ('say "hi"; bye')""", "SELECT 1"]

    def test_empty_string_literal(self) -> None:
        """Test ``''`` as an empty literal followed by a terminator."""
        assert split_statements("SELECT ''; SELECT 2") == ["SELECT ''", "SELECT 2"]

    def test_unterminated_string_consumes_rest(self) -> None:
        """Test an unclosed literal keeps the remaining text in one statement."""
        assert split_statements("SELECT 'open; SELECT 2") == ["SELECT 'open; SELECT 2"]


class TestKnownGaps:
    """Document constructs the splitter does not treat specially."""

    def test_dollar_quoted_body_is_split(self) -> None:
        """Test dollar-quoted function bodies are not opaque."""
        script = "CREATE FUNCTION f() RETURNS INT AS $$ BEGIN RETURN 1; END; $$ LANGUAGE plpgsql;"

        statements = split_statements(script)
        assert statements == [
            "CREATE FUNCTION f() RETURNS INT AS $$ BEGIN RETURN 1",
            "END",
            "$$ LANGUAGE plpgsql",
        ]

    def test_comments_are_kept_in_statements(self) -> None:
        """Test comments stay attached to the following statement."""
        script = "SELECT 1; -- trailing note\nSELECT 2;"

        statements = split_statements(script)
        assert statements == ["SELECT 1", "-- trailing note\nSELECT 2"]

    def test_only_comments(self) -> None:
        """Test comment-only text is returned as a single statement."""
        assert split_statements("-- one\n-- two") == ["-- one\n-- two"]
