"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from gwimport.adapters.mock import MockProviderClient
from gwimport.core.models.inventory import ApiResource, LayerSummary, RestApiSummary

COMMON_ARN = "arn:aws:lambda:us-east-1:000000000000:layer:common:1"
SHARED_UTILS_ARN = "arn:aws:lambda:us-east-1:123456789012:layer:shared-utils:7"


@pytest.fixture
def mock_client() -> MockProviderClient:
    """An inventory with one REST API 'my-api' and two layers."""
    return MockProviderClient(
        rest_apis=[
            RestApiSummary(id="other1", name="other-api"),
            RestApiSummary(id="api123", name="my-api"),
        ],
        resources={
            "api123": [
                ApiResource(id="abc123", path="/"),
                ApiResource(id="u1", path="/users"),
                ApiResource(id="o1", path="/orders"),
            ],
        },
        layers=[
            LayerSummary(name="shared-utils", latest_version_arn=SHARED_UTILS_ARN),
            LayerSummary(name="common", latest_version_arn=COMMON_ARN),
        ],
    )


@pytest.fixture
def service_yml(tmp_path: Path) -> Path:
    """A serverless.yml importing 'my-api' with inferred resources."""
    content = textwrap.dedent("""\
        service: users-service
        frameworkVersion: "3"

        provider:
          name: aws
          runtime: python3.12
          layers:
            - common

        custom:
          importApiGateway:
            name: my-api
            resolveLayerArns: true

        functions:
          getUser:
            handler: handler.get_user
            layers:
              - shared-utils
            events:
              - http:
                  path: /users/{id}
                  method: get
    """)
    path = tmp_path / "serverless.yml"
    path.write_text(content)
    return path


@pytest.fixture
def inventory_yml(tmp_path: Path) -> Path:
    """A mock inventory file matching the mock_client fixture."""
    content = textwrap.dedent(f"""\
        restApis:
          - id: api123
            name: my-api
        resources:
          api123:
            - {{id: abc123, path: /}}
            - {{id: u1, path: /users}}
            - {{id: o1, path: /orders}}
        layers:
          - name: shared-utils
            latestVersionArn: "{SHARED_UTILS_ARN}"
          - name: common
            latestVersionArn: "{COMMON_ARN}"
    """)
    path = tmp_path / "inventory.yml"
    path.write_text(content)
    return path
