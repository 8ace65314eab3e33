"""Tests for CLI interface."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from pkgmeta.cli import main
from pkgmeta.constants import RULE_ENV_VAR

VALID_PACKAGE = """\
metadata:
  id: Test-Package
  maintainers:
    - AdmiringWorm
  project_url: https://example.org/test-package
  license: MIT
  chocolatey:
    id: test-package
    maintainers:
      - AdmiringWorm
    authors:
      - Someone
    version: 1.2.0
    description: Some description
"""

INVALID_PACKAGE = """\
metadata:
  id: ""
  maintainers: []
  project_url: file:///C:/test
"""


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the commands in an empty directory, without configuration files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _package(directory: Path, content: str = VALID_PACKAGE) -> Path:
    path = directory / "package.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test that --help shows the commands."""
    result = cli_runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "validate" in result.output
    assert "generate" in result.output
    assert "minimize" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test that --version shows the version."""
    result = cli_runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_package(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test a valid package exits with 0."""
        result = cli_runner.invoke(main, ["validate", str(_package(workspace))])

        assert result.exit_code == 0
        assert "No issues was found during validation!" in result.output

    def test_requirements_exit_with_issues(
        self, cli_runner: CliRunner, workspace: Path
    ) -> None:
        """Test failed requirements exit with 1."""
        path = _package(workspace, INVALID_PACKAGE)

        result = cli_runner.invoke(main, ["validate", str(path)])

        assert result.exit_code == 1
        assert "REQUIREMENTS" in result.output
        assert "A identifier can not be empty!" in result.output

    def test_community_notes_do_not_fail(
        self, cli_runner: CliRunner, workspace: Path
    ) -> None:
        """Test notes are shown but do not change the exit code."""
        path = _package(workspace, "metadata:\n  id: Test\n")

        result = cli_runner.invoke(main, ["validate", str(path), "--rule", "community"])

        assert result.exit_code == 0
        assert "NOTES" in result.output
        assert "choco:" in result.output

    def test_core_rules_by_default(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test community only rules do not run by default."""
        path = _package(workspace, "metadata:\n  id: Test\n")

        result = cli_runner.invoke(main, ["validate", str(path)])

        assert result.exit_code == 0
        assert "NOTES" not in result.output

    def test_rule_from_environment(
        self,
        cli_runner: CliRunner,
        workspace: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test the rule kind is read from the environment."""
        monkeypatch.setenv(RULE_ENV_VAR, "community")
        path = _package(workspace, "metadata:\n  id: Test\n")

        result = cli_runner.invoke(main, ["validate", str(path)])

        assert "NOTES" in result.output

    def test_rule_from_config(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test the rule kind is read from the discovered configuration."""
        (workspace / ".pkgmeta.yaml").write_text("rule: community\n")
        path = _package(workspace, "metadata:\n  id: Test\n")

        result = cli_runner.invoke(main, ["validate", str(path)])

        assert "NOTES" in result.output

    def test_json_format(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test validation results can be written as JSON."""
        path = _package(workspace, INVALID_PACKAGE)

        result = cli_runner.invoke(main, ["validate", str(path), "--format", "json"])

        assert result.exit_code == 1
        output = json.loads(result.stdout)
        assert output["status"] == "issues_found"
        assert len(output["messages"]) == 3

    def test_invalid_rule_option(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test unknown rule kinds are rejected by the option."""
        result = cli_runner.invoke(
            main, ["validate", str(_package(workspace)), "--rule", "strict"]
        )
        assert result.exit_code == 2

    def test_invalid_package_file(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test invalid package files exit with 2."""
        path = _package(workspace, "updater: {}\n")

        result = cli_runner.invoke(main, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Error: PackageFileError" in result.output

    def test_invalid_config_file(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test invalid configuration files exit with 2."""
        config = workspace / "config.yaml"
        config.write_text("rule: strict\n")

        result = cli_runner.invoke(
            main, ["validate", str(_package(workspace)), "--config", str(config)]
        )

        assert result.exit_code == 2
        assert "Error: ConfigurationError" in result.output

    def test_missing_file(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test a missing package file is a usage error."""
        result = cli_runner.invoke(main, ["validate", "missing.yaml"])
        assert result.exit_code == 2


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generates_nuspec(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test the nuspec file is created in the work directory."""
        result = cli_runner.invoke(
            main, ["generate", str(_package(workspace)), "--output", "build"]
        )

        assert result.exit_code == 0
        nuspec = workspace / "build" / "test-package" / "test-package.nuspec"
        assert nuspec.is_file()
        content = nuspec.read_text(encoding="utf-8")
        assert "<version>1.2.0</version>" in content
        assert "<licenseUrl>https://spdx.org/licenses/MIT.html</licenseUrl>" in content

    def test_default_work_directory(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test the default work directory is used without option."""
        result = cli_runner.invoke(main, ["generate", str(_package(workspace))])

        assert result.exit_code == 0
        assert (workspace / "output" / "test-package" / "test-package.nuspec").is_file()

    def test_work_directory_from_config(
        self, cli_runner: CliRunner, workspace: Path
    ) -> None:
        """Test the work directory is read from the configuration."""
        (workspace / ".pkgmeta.yaml").write_text("work_dir: packages\n")

        result = cli_runner.invoke(main, ["generate", str(_package(workspace))])

        assert result.exit_code == 0
        assert (workspace / "packages" / "test-package").is_dir()

    def test_refuses_invalid_metadata(
        self, cli_runner: CliRunner, workspace: Path
    ) -> None:
        """Test nothing is generated when requirements fail."""
        path = _package(workspace, INVALID_PACKAGE)

        result = cli_runner.invoke(main, ["generate", str(path), "--output", "build"])

        assert result.exit_code == 1
        assert "REQUIREMENTS" in result.output
        assert not (workspace / "build").exists()


class TestMinimizeCommand:
    """Tests for the minimize command."""

    def test_removes_inherited_values(
        self, cli_runner: CliRunner, workspace: Path
    ) -> None:
        """Test values equal to the inherited values are removed."""
        result = cli_runner.invoke(main, ["minimize", str(_package(workspace))])

        assert result.exit_code == 0
        chocolatey = yaml.safe_load(result.stdout)["metadata"]["chocolatey"]
        assert chocolatey == {
            "version": "1.2.0",
            "authors": ["Someone"],
            "description": "Some description",
        }

    def test_keeps_maintainers_unset(
        self, cli_runner: CliRunner, workspace: Path
    ) -> None:
        """Test the maintainer resolved from the environment is not written."""
        path = _package(
            workspace,
            "metadata:\n  id: Test\n  chocolatey:\n    authors:\n      - Someone\n",
        )

        result = cli_runner.invoke(main, ["minimize", str(path)])

        assert result.exit_code == 0
        assert "test-maintainer" not in result.stdout
        assert yaml.safe_load(result.stdout) == {
            "metadata": {"id": "Test", "chocolatey": {"authors": ["Someone"]}}
        }

    def test_writes_output_file(self, cli_runner: CliRunner, workspace: Path) -> None:
        """Test the minimized data can be written to a file."""
        target = workspace / "minimized.yaml"

        result = cli_runner.invoke(
            main, ["minimize", str(_package(workspace)), "--output", str(target)]
        )

        assert result.exit_code == 0
        data = yaml.safe_load(target.read_text(encoding="utf-8"))
        assert data["metadata"]["id"] == "Test-Package"

    def test_without_chocolatey_metadata(
        self, cli_runner: CliRunner, workspace: Path
    ) -> None:
        """Test packages without chocolatey metadata are written unchanged."""
        path = _package(workspace, "metadata:\n  id: test\n")

        result = cli_runner.invoke(main, ["minimize", str(path)])

        assert result.exit_code == 0
        assert "chocolatey" not in yaml.safe_load(result.stdout)["metadata"]
