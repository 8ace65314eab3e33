"""Shared fixtures for pkgmeta tests."""

import pytest
from click.testing import CliRunner

from pkgmeta.constants import MAINTAINER_ENV_VAR, RULE_ENV_VAR


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use a fixed default maintainer and no rule override in every test."""
    monkeypatch.setenv(MAINTAINER_ENV_VAR, "test-maintainer")
    monkeypatch.delenv(RULE_ENV_VAR, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()
