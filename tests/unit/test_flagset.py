"""Tests for the shared FlagSet."""

from types import SimpleNamespace

import click
import pytest

from options.flagset import FlagRedefinedError, FlagSet, FlagSetError


class TestRegistration:
    """Test registering flags."""

    def test_string_var(self) -> None:
        fs = FlagSet("apiserver")
        target = SimpleNamespace(value="x")
        fs.string_var(target, "value", "some-flag", "x", "Some flag.")

        assert fs.has_flag("some-flag")
        assert not fs.has_flag("other-flag")
        assert fs.lookup("other-flag") is None

    def test_names_keep_registration_order(self) -> None:
        fs = FlagSet("apiserver")
        target = SimpleNamespace(a="", b="")
        fs.string_var(target, "b", "b-flag", "", "B.")
        fs.string_var(target, "a", "a-flag", "", "A.")

        assert fs.names() == ["b-flag", "a-flag"]

    def test_redefined_flag_raises(self) -> None:
        fs = FlagSet("apiserver")
        first = SimpleNamespace(value="")
        second = SimpleNamespace(value="")
        fs.string_var(first, "value", "dup", "", "First.")

        with pytest.raises(FlagRedefinedError) as exc_info:
            fs.string_var(second, "value", "dup", "", "Second.")

        assert isinstance(exc_info.value, FlagSetError)
        assert exc_info.value.name == "dup"
        assert "dup" in str(exc_info.value)


class TestParse:
    """Test parsing arguments into bound targets."""

    def test_values_written_to_each_target(self) -> None:
        fs = FlagSet("apiserver")
        first = SimpleNamespace(path="")
        second = SimpleNamespace(level="INFO")
        fs.string_var(first, "path", "path", first.path, "Path.")
        fs.string_var(second, "level", "level", second.level, "Level.")

        assert fs.parse(["--path=/tmp/a", "--level", "DEBUG"]) is True
        assert fs.parsed
        assert first.path == "/tmp/a"
        assert second.level == "DEBUG"

    def test_last_value_wins(self) -> None:
        fs = FlagSet("apiserver")
        target = SimpleNamespace(path="")
        fs.string_var(target, "path", "path", "", "Path.")

        fs.parse(["--path=/tmp/a", "--path=/tmp/b"])
        assert target.path == "/tmp/b"

    def test_unknown_flag_raises_usage_error(self) -> None:
        fs = FlagSet("apiserver")
        target = SimpleNamespace(path="")
        fs.string_var(target, "path", "path", "", "Path.")

        with pytest.raises(click.UsageError):
            fs.parse(["--no-such-flag=1"])
        assert target.path == ""

    def test_missing_value_raises_usage_error(self) -> None:
        fs = FlagSet("apiserver")
        fs.string_var(SimpleNamespace(path=""), "path", "path", "", "Path.")

        with pytest.raises(click.UsageError):
            fs.parse(["--path"])

    def test_help_returns_false(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs = FlagSet("apiserver")
        target = SimpleNamespace(path="/default")
        fs.string_var(target, "path", "path", target.path, "Path to a thing.")

        assert fs.parse(["--help"]) is False
        assert target.path == "/default"
        assert "--path" in capsys.readouterr().out


class TestHelp:
    """Test help output."""

    def test_format_help_lists_flags(self) -> None:
        fs = FlagSet("apiserver")
        fs.string_var(SimpleNamespace(path=""), "path", "path", "", "Path to a thing.")

        text = fs.format_help()
        assert "--path" in text
        assert "Path to a thing." in text
