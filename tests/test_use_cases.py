"""
Tests for use cases — resolve and config check without the CLI.
"""

from pathlib import Path

import yaml

from gwimport.adapters.mock import MockProviderClient
from gwimport.core.use_cases.config_check import check_config
from gwimport.core.use_cases.resolve import run_resolve


class TestRunResolve:
    def test_commits_and_writes(self, service_yml: Path, mock_client: MockProviderClient, tmp_path: Path):
        out = tmp_path / "resolved.yml"
        result = run_resolve(lambda: mock_client, config_path=service_yml, output_path=out)

        assert result.ok
        assert result.report is not None and result.report.committed
        assert result.output_path == out
        data = yaml.safe_load(out.read_text())
        assert data["provider"]["apiGateway"]["restApiRootResourceId"] == "abc123"
        assert data["custom"]["importApiGateway"] == {
            "name": "my-api",
            "resolveLayerArns": True,
            "resources": ["/", "/users"],
        }

    def test_inactive_config_never_builds_client(self, tmp_path: Path):
        config = tmp_path / "serverless.yml"
        config.write_text("service: x\n")

        def factory():
            raise AssertionError("client should not be created")

        result = run_resolve(factory, config_path=config)
        assert result.skipped
        assert result.ok
        assert result.to_dict()["skipped"] is True

    def test_client_factory_failure(self, service_yml: Path):
        def factory():
            raise RuntimeError("The config profile (nope) could not be found")

        result = run_resolve(factory, config_path=service_yml)
        assert not result.ok
        assert "Cannot create provider client" in result.error
        assert result.to_dict() == {"error": result.error}

    def test_abort_does_not_write(self, service_yml: Path, tmp_path: Path):
        out = tmp_path / "resolved.yml"
        result = run_resolve(MockProviderClient, config_path=service_yml, output_path=out)

        assert not result.ok
        assert result.report is not None and result.report.aborted
        assert not out.exists()


class TestCheckConfig:
    def test_valid(self, service_yml: Path):
        result = check_config(service_yml)
        assert result.valid
        assert result.errors == []
        assert result.to_dict()["function_count"] == 1

    def test_missing_file(self, tmp_path: Path):
        result = check_config(tmp_path / "missing.yml")
        assert not result.valid
        assert "not found" in result.errors[0]

    def test_empty_resources_warns(self, tmp_path: Path):
        config = tmp_path / "serverless.yml"
        config.write_text("custom:\n  importApiGateway:\n    name: my-api\n    resources: []\n")
        result = check_config(config)
        assert result.valid
        assert any("empty list" in w for w in result.warnings)
