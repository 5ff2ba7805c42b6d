"""Tests for the validate command."""

import json

import pytest
from click.testing import CliRunner

from kubewait.cli import main


@pytest.fixture
def runner(clean_env) -> CliRunner:
    return CliRunner()


class TestValidateCommand:
    def test_delete(self, runner):
        result = runner.invoke(main, ["validate", "--for", "DELETE"])
        assert result.exit_code == 0
        assert "delete" in result.output

    def test_named_condition_json(self, runner):
        result = runner.invoke(
            main, ["validate", "--for=condition=Ready=False", "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "condition": "condition=Ready=False",
            "allow_no_resources": False,
            "ignores_not_found": False,
            "kind": "condition",
            "name": "Ready",
            "value": "False",
        }

    def test_jsonpath_human(self, runner):
        result = runner.invoke(
            main, ["validate", "--for", "jsonpath=.status.phase='Running'"]
        )
        assert result.exit_code == 0
        assert "jsonpath={.status.phase}=Running" in result.output
        assert "Expected value:     'Running'" in result.output

    def test_allow_no_resources_flag(self, runner):
        result = runner.invoke(
            main,
            [
                "validate",
                "--for=delete",
                "--allow-no-resources",
                "--format=json",
            ],
        )
        data = json.loads(result.output)
        assert data["allow_no_resources"] is True
        assert data["ignores_not_found"] is True

    def test_allow_no_resources_from_env(self, runner):
        result = runner.invoke(
            main,
            ["validate", "--for=delete", "--format=json"],
            env={"KUBEWAIT_ALLOW_NO_RESOURCES": "yes"},
        )
        assert json.loads(result.output)["allow_no_resources"] is True

    def test_malformed_jsonpath(self, runner):
        result = runner.invoke(main, ["validate", "--for", "jsonpath={.a}"])
        assert result.exit_code == 2
        assert "jsonpath wait format must be" in result.output

    def test_unrecognized(self, runner):
        result = runner.invoke(main, ["validate", "--for", "foo=bar"])
        assert result.exit_code == 2
        assert "unrecognized condition: 'foo=bar'" in result.output

    def test_invalid_env_config(self, runner):
        result = runner.invoke(
            main,
            ["validate", "--for=delete"],
            env={"KUBEWAIT_LOG_LEVEL": "loud"},
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
