"""
Tests for domain models — import config and the service document.
"""

import pytest
from pydantic import ValidationError

from gwimport.core.models import (
    GatewayImportConfig,
    HttpEvent,
    ResolvedGatewayState,
    ServiceModel,
)


class TestGatewayImportConfig:
    def test_defaults(self):
        config = GatewayImportConfig(name="my-api")
        assert config.path == "/"
        assert config.resources is None
        assert config.resolve_layer_arns is False
        assert not config.resources_declared

    def test_yaml_aliases(self):
        config = GatewayImportConfig.model_validate(
            {"name": "my-api", "resolveLayerArns": True, "resources": ["/users"]}
        )
        assert config.resolve_layer_arns is True
        assert config.resources == ["/users"]

    def test_empty_path_falls_back_to_root(self):
        assert GatewayImportConfig(name="my-api", path="").path == "/"
        assert GatewayImportConfig.model_validate({"name": "x", "path": None}).path == "/"

    def test_empty_resources_counts_as_declared(self):
        config = GatewayImportConfig(name="my-api", resources=[])
        assert config.resources_declared

    def test_name_required(self):
        with pytest.raises(ValidationError):
            GatewayImportConfig.model_validate({"path": "/"})


class TestHttpEvent:
    def test_mapping_form(self):
        event = HttpEvent.model_validate({"path": "/users/{id}", "method": "get", "cors": True})
        assert event.path == "/users/{id}"
        assert event.method == "get"

    def test_shorthand_form(self):
        event = HttpEvent.model_validate("GET /users/{id}")
        assert event.method == "GET"
        assert event.path == "/users/{id}"

    def test_shorthand_without_path(self):
        event = HttpEvent.model_validate("GET")
        assert event.path is None


class TestServiceModel:
    def _service(self) -> ServiceModel:
        return ServiceModel.model_validate({
            "service": "users",
            "provider": {"name": "aws", "layers": ["common"]},
            "functions": {
                "getUser": {
                    "handler": "handler.get_user",
                    "events": [
                        {"http": {"path": "/users/{id}", "method": "get"}},
                        {"http": "POST /users"},
                        {"sqs": {"arn": "arn:aws:sqs:us-east-1:1:q"}},
                        {"http": {"method": "get"}},
                    ],
                },
                "worker": {"handler": "handler.work"},
            },
        })

    def test_http_paths(self):
        service = self._service()
        functions = dict(service.iter_functions())
        assert functions["getUser"].http_paths() == ["/users/{id}", "/users"]
        assert functions["worker"].http_paths() == []

    def test_iter_functions_without_functions(self):
        service = ServiceModel.model_validate({"service": "empty"})
        assert list(service.iter_functions()) == []

    def test_to_document_preserves_unknown_keys(self):
        doc = self._service().to_document()
        assert doc["service"] == "users"
        assert doc["provider"]["name"] == "aws"
        assert doc["functions"]["getUser"]["handler"] == "handler.get_user"
        assert doc["functions"]["getUser"]["events"][2] == {
            "sqs": {"arn": "arn:aws:sqs:us-east-1:1:q"}
        }

    def test_to_document_omits_untouched_api_gateway(self):
        doc = self._service().to_document()
        assert "apiGateway" not in doc["provider"]


class TestResolvedGatewayState:
    def test_provider_fields(self):
        state = ResolvedGatewayState(
            rest_api_id="api123",
            rest_api_root_resource_id="abc123",
            rest_api_resources={"/users": "u1"},
        )
        assert state.to_provider_fields() == {
            "restApiId": "api123",
            "restApiRootResourceId": "abc123",
            "restApiResources": {"/users": "u1"},
        }
