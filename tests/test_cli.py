"""
Tests for the CLI entrypoint — exit codes and messages for each way a
session can end.  Host detection, PATH lookup and the command adapter
are replaced so nothing real is installed or run.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from swaplauncher.adapters.mock import MockAdapter
from swaplauncher.core.models.action import Receipt
from swaplauncher.core.models.platform import Platform
from swaplauncher.core.services.invocation import TEST_ACTION_ID
from swaplauncher.main import cli


@pytest.fixture
def host(tmp_path: Path, monkeypatch):
    """Pretend to be an Ubuntu host with cargo installed."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SWAPLAUNCHER_LOG_FILE", raising=False)
    mock = MockAdapter()
    state = {"platform": Platform(family="linux", raw_id="ubuntu"), "cargo": "/usr/bin/cargo"}

    monkeypatch.setattr(
        "swaplauncher.core.services.os_detect.detect_platform",
        lambda: state["platform"],
    )
    monkeypatch.setattr("shutil.which", lambda cmd: state["cargo"])
    monkeypatch.setattr(
        "swaplauncher.adapters.shell.command.ShellCommandAdapter",
        lambda: mock,
    )
    state["runner"] = mock
    return state


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "toolchain" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestInteractiveSession:
    def test_unit_tests(self, host):
        result = CliRunner().invoke(cli, [], input="5\n")
        assert result.exit_code == 0
        assert "cargo is installed." in result.output
        assert "Running all unit tests" in result.output
        assert host["runner"].actions[0].argv == ["cargo", "test"]

    def test_named_scenario(self, host):
        result = CliRunner().invoke(cli, [], input="3\nyes\n")
        assert result.exit_code == 0
        assert "src/swaps/liquid.rs" in result.output
        assert host["runner"].actions[0].argv == [
            "cargo", "test", "liquid_submarine", "--", "--nocapture", "--include-ignored",
        ]

    def test_notice_declined(self, host):
        result = CliRunner().invoke(cli, [], input="1\nYES\n")
        assert result.exit_code == 1
        assert "Exiting..." in result.output
        assert host["runner"].call_count == 0

    def test_invalid_choice(self, host):
        result = CliRunner().invoke(cli, [], input="7\n")
        assert result.exit_code == 0
        assert "Invalid choice" in result.output
        assert host["runner"].call_count == 0

    def test_test_failure_exit_code(self, host):
        host["runner"].set_failure(TEST_ACTION_ID, return_code=101)
        result = CliRunner().invoke(cli, [], input="5\n")
        assert result.exit_code == 101
        assert "exited with code" not in result.output

    def test_runner_not_found(self, host):
        host["runner"].set_response(TEST_ACTION_ID, Receipt.failure(
            adapter="shell", action_id=TEST_ACTION_ID,
            error="Command not found: cargo", return_code=127,
        ))
        result = CliRunner().invoke(cli, [], input="5\n")
        assert result.exit_code == 127
        assert "Command not found: cargo" in result.output

    def test_unwritable_log_file(self, host, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SWAPLAUNCHER_LOG_FILE", str(tmp_path / "missing" / "launcher.log"))
        result = CliRunner().invoke(cli, [], input="5\n")
        assert result.exit_code == 0
        assert "Running all unit tests" in result.output
        assert host["runner"].call_count == 1

    def test_install_declined(self, host):
        host["cargo"] = None
        result = CliRunner().invoke(cli, [], input="maybe\nn\n")
        assert result.exit_code == 1
        assert "Please answer yes or no." in result.output
        assert "Installation aborted." in result.output
        assert "Select a test to run:" not in result.output

    def test_install_then_run(self, host):
        host["cargo"] = None
        result = CliRunner().invoke(cli, [], input="y\n5\n")
        assert result.exit_code == 0
        assert [a.id for a in host["runner"].actions] == ["install-toolchain", TEST_ACTION_ID]

    def test_unsupported_os(self, host):
        host["cargo"] = None
        host["platform"] = Platform(family="unknown")
        result = CliRunner().invoke(cli, [], input="y\n")
        assert result.exit_code == 1
        assert "Unsupported operating system" in result.output
        assert host["runner"].call_count == 0


class TestConfigOption:
    def test_custom_runner(self, host, tmp_path: Path):
        config = tmp_path / "custom.yml"
        config.write_text("runner:\n  command: [cargo, nextest, run]\n")
        result = CliRunner().invoke(cli, ["--config", str(config)], input="5\n")
        assert result.exit_code == 0
        assert host["runner"].actions[0].argv == ["cargo", "nextest", "run"]
        assert host["runner"].call_log[0].project_root == str(tmp_path.resolve())

    def test_invalid_config(self, host, tmp_path: Path):
        config = tmp_path / "launcher.yml"
        config.write_text("- not\n- a mapping\n")
        result = CliRunner().invoke(cli, [], input="5\n")
        assert result.exit_code == 1
        assert "Expected a YAML mapping" in result.output
        assert host["runner"].call_count == 0

    def test_missing_config(self, host, tmp_path: Path):
        result = CliRunner().invoke(cli, ["--config", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1
        assert "not found" in result.output
