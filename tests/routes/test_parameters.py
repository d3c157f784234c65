"""
Tests for parameter parsing over HTTP.

Tests cover:
- POST /parameters/parse: parsed values, defaults, every 400 error kind, 422 for bad schemas
- scalar_parameter dependency: header, query and path parameters on a route,
  400 responses via the app exception handler
"""

from typing import Annotated, Optional

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from paramcoerce.main import app, register_exception_handlers
from paramcoerce.routes.parameters import scalar_parameter

client = TestClient(app)


def parse(schema, value, name="Test", location="header"):
    return client.post(
        "/parameters/parse",
        json={"name": name, "location": location, "schema": schema, "value": value},
    )


class TestParseEndpoint:
    """Tests for POST /parameters/parse"""

    def test_parse_valid_integer(self):
        response = parse(
            {
                "type": "integer",
                "multipleOf": 5,
                "minimum": 40,
                "exclusiveMinimum": True,
                "maximum": 45,
                "exclusiveMaximum": False,
            },
            "45",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "PARSED"
        assert data["name"] == "Test"
        assert data["value"] == 45

    def test_parse_optional_unspecified(self):
        response = parse({"type": "integer"}, None)

        assert response.status_code == 200
        assert response.json()["value"] is None

    def test_parse_default_keeps_int64_precision(self):
        response = parse({"type": "integer", "default": 9223372036854775807}, None)

        assert response.status_code == 200
        assert response.json()["value"] == 9223372036854775807

    def test_parse_default_when_blank(self):
        response = parse({"type": "integer", "default": 1}, "")

        assert response.status_code == 200
        assert response.json()["value"] == 1

    def test_parse_number(self):
        response = parse({"type": "number", "multipleOf": 0.5}, "2.5")

        assert response.status_code == 200
        assert response.json()["value"] == 2.5

    @pytest.mark.parametrize("schema, value, error, details", [
        ({"type": "integer"}, "hello world", "invalid_whole_number_format",
         '"hello world" is not a properly-formatted whole number'),
        ({"type": "integer"}, "3.5", "invalid_whole_number_format",
         '"3.5" is not a properly-formatted whole number'),
        ({"type": "integer", "multipleOf": 3}, "14", "constraint_violation",
         "Value 14 is not a multiple of 3"),
        ({"type": "integer", "format": "int32"}, "2147483648", "out_of_format_range",
         '"2147483648" is not a valid int32. Must be between -2147483648 and 2147483647'),
        ({"type": "integer", "format": "int64"}, "9223372036854779999", "out_of_format_range",
         '"9223372036854780000" is not a valid int64. '
         "Must be between -9223372036854775808 and 9223372036854775807"),
        ({"type": "integer", "required": True}, None, "missing_required_parameter",
         'Missing required header parameter "Test"'),
        ({"type": "number"}, "abc", "invalid_number_format",
         '"abc" is not a valid numeric value'),
    ])
    def test_parse_errors(self, schema, value, error, details):
        response = parse(schema, value)

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == error
        assert detail["details"] == details
        assert detail["parameter"] == "Test"

    def test_parse_invalid_schema(self):
        """A non-positive multipleOf is a malformed request, not a parameter failure."""
        response = parse({"type": "integer", "multipleOf": 0}, "4")

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    def test_parse_missing_name(self):
        response = client.post("/parameters/parse", json={"schema": {"type": "integer"}, "value": "1"})

        assert response.status_code == 422

    def test_parse_huge_literal_with_format(self):
        response = parse({"type": "integer", "format": "int64"}, "9" * 5000)

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "out_of_format_range"

    def test_parse_large_quotient(self):
        response = parse({"type": "integer", "multipleOf": 0.5}, "100000000000000000000000000000")

        assert response.status_code == 200
        assert response.json()["value"] == 10 ** 29

    @patch("paramcoerce.routes.parameters.parse_parameter")
    def test_parse_unexpected_error(self, mock_parse):
        mock_parse.side_effect = RuntimeError("boom")

        response = parse({"type": "integer"}, "1")

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "internal_error"


@pytest.fixture
def parameter_app():
    """
    Small app whose routes read parameters through scalar_parameter,
    the way a real API would declare them.
    """
    test_app = FastAPI()
    register_exception_handlers(test_app)

    test_header = scalar_parameter("Test", {"type": "integer", "format": "int32", "required": True})
    limit_query = scalar_parameter("limit", {"type": "integer", "default": 20, "maximum": 100}, "query")
    item_path = scalar_parameter("item_id", {"type": "integer", "format": "int64", "minimum": 1}, "path")

    @test_app.post("/api/test")
    async def header_route(test: Annotated[int, Depends(test_header)]):
        return {"test": test}

    @test_app.get("/api/items")
    async def query_route(limit: Annotated[Optional[int], Depends(limit_query)]):
        return {"limit": limit}

    @test_app.get("/api/items/{item_id}")
    async def path_route(item_id: Annotated[int, Depends(item_path)]):
        return {"item_id": item_id}

    return TestClient(test_app)


class TestScalarParameterDependency:
    """Tests for the scalar_parameter dependency factory."""

    def test_header_parsed(self, parameter_app):
        response = parameter_app.post("/api/test", headers={"Test": "45"})

        assert response.status_code == 200
        assert response.json() == {"test": 45}

    def test_header_lookup_is_case_insensitive(self, parameter_app):
        response = parameter_app.post("/api/test", headers={"test": "-7"})

        assert response.status_code == 200
        assert response.json() == {"test": -7}

    def test_header_missing(self, parameter_app):
        response = parameter_app.post("/api/test")

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "missing_required_parameter"
        assert detail["details"] == 'Missing required header parameter "Test"'

    def test_header_out_of_range(self, parameter_app):
        response = parameter_app.post("/api/test", headers={"Test": "2147483648"})

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "out_of_format_range"

    def test_query_default(self, parameter_app):
        response = parameter_app.get("/api/items")

        assert response.status_code == 200
        assert response.json() == {"limit": 20}

    def test_query_blank_uses_default(self, parameter_app):
        response = parameter_app.get("/api/items?limit=")

        assert response.status_code == 200
        assert response.json() == {"limit": 20}

    def test_query_above_maximum(self, parameter_app):
        response = parameter_app.get("/api/items", params={"limit": "101"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "constraint_violation"
        assert detail["details"] == "Value 101 is greater than maximum 100"
        assert detail["parameter"] == "limit"

    def test_path_int64(self, parameter_app):
        response = parameter_app.get("/api/items/9223372036854775807")

        assert response.status_code == 200
        assert response.json() == {"item_id": 9223372036854775807}

    def test_path_not_a_whole_number(self, parameter_app):
        response = parameter_app.get("/api/items/3.5")

        assert response.status_code == 400
        assert response.json()["detail"]["details"] == '"3.5" is not a properly-formatted whole number'

    def test_unsupported_location(self):
        with pytest.raises(ValueError):
            scalar_parameter("payload", {"type": "integer"}, "body")
