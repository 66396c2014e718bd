"""
Tests for CLI commands.

Uses typer's CliRunner to test CLI commands without a real bundle.
"""

import plistlib

from typer.testing import CliRunner

from fitfam.cli.main import app

runner = CliRunner()

VALID_OPTIONS = {"GOOGLE_APP_ID": "1:1:ios:1", "GCM_SENDER_ID": "1"}


def write_plist(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        plistlib.dump(data, f)


class TestVersion:
    """Tests for --version flag."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "fitfam version" in result.output


class TestHelp:
    """Tests for help output."""

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "fitfam" in result.output.lower()

    def test_help_describes_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "sign-in" in result.output
        assert "configure" in result.output
        assert "env" in result.output

    def test_configure_help(self):
        result = runner.invoke(app, ["configure", "--help"])
        assert result.exit_code == 0


class TestConfigure:
    """Tests for the configure command."""

    def test_demo_mode_exits_zero(self, tmp_path):
        result = runner.invoke(app, ["configure", "--project-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert "Demo mode" in result.output

    def test_configured(self, tmp_path):
        write_plist(tmp_path / "Resources" / "GoogleService-Info.plist", VALID_OPTIONS)
        result = runner.invoke(app, ["configure", "--project-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert "Configured" in result.output
        assert "generic" in result.output

    def test_partial_failure_exits_zero(self, tmp_path):
        (tmp_path / "Resources").mkdir()
        (tmp_path / "Resources" / "GoogleService-Info.plist").write_text("broken")
        result = runner.invoke(app, ["configure", "--project-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert "Partial failure" in result.output

    def test_bad_settings_exit_one(self, tmp_path):
        (tmp_path / "fitfam.yaml").write_text("bundle: [\n")
        result = runner.invoke(app, ["configure", "--project-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestEnv:
    """Tests for the env command."""

    def test_lists_constants(self, tmp_path):
        write_plist(tmp_path / "Resources" / "Info.plist", {"CFBundleIdentifier": "com.fitfam.release"})
        result = runner.invoke(app, ["env", "--project-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert "streak_reset_hour" in result.output
        assert "is_production" in result.output
