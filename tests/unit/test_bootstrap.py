"""End-to-end tests for the server startup sequence."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.egress_selector import EgressSelector
from core.scheme import CodecFactory, new_config_codecs
from core.settings import ServerConfig
from options.base import AggregateError
from server.bootstrap import build_config, main


@pytest.fixture(autouse=True)
def configure_logger(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Keep startup from reconfiguring the root logger during tests."""
    mock = MagicMock()
    monkeypatch.setattr("options.logging.configure_logger", mock)
    return mock


class TestBuildConfig:
    """Test assembling the server config."""

    def test_defaults(self) -> None:
        config = build_config([])

        assert isinstance(config, ServerConfig)
        assert config.observability.log_level == "INFO"
        assert isinstance(config.egress_selector, EgressSelector)
        assert config.tracer_provider is None

    def test_settings_file(self, settings_path: Path) -> None:
        config = build_config(["--log-level=debug"], settings_path)
        assert config.name == "apiserver"
        assert config.observability.log_level == "DEBUG"

    def test_egress_selector_passed_through(self) -> None:
        egress_selector = EgressSelector()
        config = build_config([], egress_selector=egress_selector)
        assert config.egress_selector is egress_selector

    def test_codecs_kept_on_config(self) -> None:
        codecs = new_config_codecs()
        config = build_config([], codecs=codecs)
        assert config.config_codecs is codecs

    def test_codecs_built_when_not_given(self, tracing_config_file: Path) -> None:
        config = build_config([])

        assert isinstance(config.config_codecs, CodecFactory)
        decoded = config.config_codecs.decode(tracing_config_file.read_bytes())
        assert decoded.endpoint == "localhost:4317"

    def test_existing_tracing_file(self, tracing_config_file: Path) -> None:
        config = build_config([f"--tracing-config-file={tracing_config_file}"])
        assert config.tracer_provider is None

    def test_missing_tracing_file_is_fatal(self) -> None:
        with pytest.raises(AggregateError) as exc_info:
            build_config(["--tracing-config-file=/tmp/does-not-exist.yaml"])

        assert len(exc_info.value.errors) == 1
        assert "/tmp/does-not-exist.yaml" in str(exc_info.value.errors[0])

    def test_help(self) -> None:
        assert build_config(["--help"]) is None


class TestMain:
    """Test exit codes and startup messages."""

    def test_success(self, settings_path: Path) -> None:
        assert main([], settings_path) == 0

    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--help"]) == 0
        assert "--tracing-config-file" in capsys.readouterr().out

    def test_missing_tracing_file(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            code = main(["--tracing-config-file=/tmp/does-not-exist.yaml"])

        assert code == 1
        assert "tracing-config-file /tmp/does-not-exist.yaml does not exist" in caplog.text

    def test_no_tracing_flag_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            assert main([]) == 0
        assert "tracing" not in caplog.text

    def test_every_failure_reported(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            code = main(["--log-level=LOUD", "--tracing-config-file=/nonexistent/trace.yaml"])

        assert code == 1
        assert "LOUD" in caplog.text
        assert "/nonexistent/trace.yaml" in caplog.text

    def test_unknown_flag(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            assert main(["--no-such-flag"]) == 1
        assert "Invalid arguments" in caplog.text

    def test_missing_settings_file(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            assert main([], Path("/nonexistent/settings.yaml")) == 1
        assert "Configuration error" in caplog.text

    def test_malformed_settings_section(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("server: edge\n")

        with caplog.at_level(logging.ERROR):
            assert main([], path) == 1
        assert "Configuration error" in caplog.text
        assert "server" in caplog.text
