"""
Tests for resource selection — explicit validation and inference.
"""

import pytest

from gwimport.core.errors import MissingPathError
from gwimport.core.models.config import GatewayImportConfig
from gwimport.core.models.service import FunctionDescriptor
from gwimport.core.services.resource_selection import (
    infer_resource_paths,
    match_existing_paths,
    select_resources,
)

PATH_INDEX = {"/": "abc123", "/users": "u1", "/orders": "o1"}


def _function(*paths: str) -> FunctionDescriptor:
    return FunctionDescriptor.model_validate(
        {"events": [{"http": {"path": p, "method": "get"}} for p in paths]}
    )


class TestExplicitResources:
    def test_selects_configured_paths(self):
        config = GatewayImportConfig(name="my-api", resources=["/users"])
        assert select_resources(config, PATH_INDEX) == [("/users", "u1")]

    def test_keeps_configured_order(self):
        config = GatewayImportConfig(name="my-api", resources=["/orders", "/", "/users"])
        assert select_resources(config, PATH_INDEX) == [
            ("/orders", "o1"),
            ("/", "abc123"),
            ("/users", "u1"),
        ]

    def test_missing_path_raises(self):
        config = GatewayImportConfig(name="my-api", resources=["/users", "/missing"])
        with pytest.raises(MissingPathError) as exc_info:
            select_resources(config, PATH_INDEX, rest_api_id="api123")
        assert exc_info.value.path == "/missing"
        assert "Unable to find resource path (/missing) for REST API (api123)" in str(
            exc_info.value
        )

    def test_exact_match_only(self):
        config = GatewayImportConfig(name="my-api", resources=["/users/{id}"])
        with pytest.raises(MissingPathError):
            select_resources(config, PATH_INDEX)

    def test_empty_list_selects_nothing(self):
        config = GatewayImportConfig(name="my-api", resources=[])
        functions = [("getUser", _function("/users/{id}"))]
        assert select_resources(config, PATH_INDEX, functions) == []
        assert config.resources == []

    def test_explicit_resources_skip_inference(self):
        config = GatewayImportConfig(name="my-api", resources=["/orders"])
        functions = [("getUser", _function("/users/{id}"))]
        assert select_resources(config, PATH_INDEX, functions) == [("/orders", "o1")]


class TestInference:
    def test_match_existing_paths_uses_string_prefix(self):
        assert match_existing_paths("/users/{id}", PATH_INDEX) == ["/", "/users"]
        assert match_existing_paths("/usersettings", PATH_INDEX) == ["/", "/users"]
        assert match_existing_paths("orders", PATH_INDEX) == []

    def test_infers_ancestor_path(self):
        functions = [("getUser", _function("/users/{id}"))]
        assert infer_resource_paths(functions, {"/users": "u1"}) == ["/users"]

    def test_duplicates_are_kept(self):
        functions = [
            ("getUser", _function("/users/{id}")),
            ("listUsers", _function("/users")),
        ]
        assert infer_resource_paths(functions, {"/users": "u1"}) == ["/users", "/users"]

    def test_no_http_events_imports_everything(self):
        functions = [("worker", FunctionDescriptor.model_validate({"handler": "h"}))]
        assert infer_resource_paths(functions, PATH_INDEX) == list(PATH_INDEX)

    def test_no_functions_imports_everything(self):
        assert infer_resource_paths([], PATH_INDEX) == list(PATH_INDEX)

    def test_no_match_imports_everything(self):
        functions = [("getItem", _function("items/{id}"))]
        assert sorted(infer_resource_paths(functions, PATH_INDEX)) == sorted(PATH_INDEX)

    def test_empty_index_infers_nothing(self):
        functions = [("getUser", _function("/users/{id}"))]
        assert infer_resource_paths(functions, {}) == []

    def test_select_writes_inferred_paths_back(self):
        config = GatewayImportConfig(name="my-api")
        functions = [("getUser", _function("/users/{id}"))]
        selected = select_resources(config, {"/users": "u1"}, functions)
        assert selected == [("/users", "u1")]
        assert config.resources == ["/users"]

    def test_inferred_paths_include_root(self):
        config = GatewayImportConfig(name="my-api")
        functions = [("getUser", _function("/users/{id}"))]
        selected = select_resources(config, PATH_INDEX, functions)
        assert selected == [("/", "abc123"), ("/users", "u1")]
