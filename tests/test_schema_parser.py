"""Tests for the schema_parser module."""

from generator.schema_parser import (
    get_response_statuses,
    get_response_type,
    parse_parameters,
    parse_request_body,
    resolve_schema_type,
)


# Minimal document with components for $ref resolution
_SPEC: dict = {
    "components": {
        "parameters": {
            "PortfolioId": {
                "name": "portfolio_id",
                "in": "path",
                "required": True,
                "description": "Identifier of the portfolio",
                "schema": {"type": "string"},
            },
        },
        "responses": {
            "NotFound": {
                "description": "Not found",
                "content": {"application/json": {"schema": {"type": "object"}}},
            },
            "EntryList": {
                "description": "List of entries",
                "content": {
                    "application/json": {"schema": {"$ref": "#/components/schemas/EntryList"}},
                },
            },
        },
        "schemas": {
            "PortfolioRequest": {
                "type": "object",
                "properties": {
                    "id": {"type": "string", "readOnly": True},
                    "name": {"type": "string", "description": "Portfolio <b>name</b>"},
                    "privacy": {"$ref": "#/components/schemas/Privacy"},
                },
                "required": ["name"],
            },
            "Privacy": {
                "type": "string",
                "enum": ["private", "shared", "team"],
            },
            "EntryList": {
                "type": "object",
                "properties": {
                    "entries": {"type": "array", "items": {"type": "object"}},
                    "total": {"type": "integer"},
                },
            },
            "ComposedObject": {
                "allOf": [
                    {"$ref": "#/components/schemas/PortfolioRequest"},
                    {
                        "type": "object",
                        "properties": {
                            "tags": {"type": "array", "items": {"type": "string"}},
                        },
                    },
                ],
            },
        },
    }
}


class TestResolveSchemaType:
    """Test OpenAPI schema → Python type conversion."""

    def test_string(self):
        assert resolve_schema_type(_SPEC, {"type": "string"}) == "str"

    def test_integer(self):
        assert resolve_schema_type(_SPEC, {"type": "integer"}) == "int"

    def test_number(self):
        assert resolve_schema_type(_SPEC, {"type": "number"}) == "float"

    def test_boolean(self):
        assert resolve_schema_type(_SPEC, {"type": "boolean"}) == "bool"

    def test_array_of_strings(self):
        assert resolve_schema_type(_SPEC, {"type": "array", "items": {"type": "string"}}) == "list[str]"

    def test_array_of_refs(self):
        """$ref in array items must resolve to dict, not str."""
        schema = {"type": "array", "items": {"$ref": "#/components/schemas/PortfolioRequest"}}
        assert resolve_schema_type(_SPEC, schema) == "list[dict]"

    def test_ref(self):
        assert resolve_schema_type(_SPEC, {"$ref": "#/components/schemas/PortfolioRequest"}) == "dict"

    def test_enum_ref(self):
        assert resolve_schema_type(_SPEC, {"$ref": "#/components/schemas/Privacy"}) == "str"

    def test_allof(self):
        assert resolve_schema_type(_SPEC, {"$ref": "#/components/schemas/ComposedObject"}) == "dict"

    def test_empty_schema(self):
        assert resolve_schema_type(_SPEC, {}) == "Any"


class TestParseParameters:
    """Test parameter extraction from operations."""

    def test_path_param_ref(self):
        op = {"parameters": [{"$ref": "#/components/parameters/PortfolioId"}]}
        params = parse_parameters(_SPEC, op)
        assert len(params) == 1
        assert params[0]["name"] == "portfolio_id"
        assert params[0]["location"] == "path"
        assert params[0]["required"] is True
        assert params[0]["description"] == "Identifier of the portfolio"

    def test_path_param_always_required(self):
        """A path parameter is required even when the document forgets to say so."""
        op = {"parameters": [{"name": "domain", "in": "path", "schema": {"type": "string"}}]}
        assert parse_parameters(_SPEC, op)[0]["required"] is True

    def test_query_params(self):
        op = {
            "parameters": [
                {"name": "had_breach_within_last_days", "in": "query", "schema": {"type": "integer"}},
            ],
        }
        params = parse_parameters(_SPEC, op)
        assert params[0]["location"] == "query"
        assert params[0]["type"] == "int"
        assert params[0]["required"] is False

    def test_path_item_params_merged(self):
        """Parameters declared on the path item apply to the operation."""
        path_item = {"parameters": [{"$ref": "#/components/parameters/PortfolioId"}]}
        op = {"parameters": [{"name": "grade", "in": "query", "schema": {"type": "string"}}]}
        names = [p["name"] for p in parse_parameters(_SPEC, op, path_item)]
        assert names == ["portfolio_id", "grade"]

    def test_operation_param_overrides_path_item(self):
        path_item = {
            "parameters": [{"name": "grade", "in": "query", "description": "old", "schema": {"type": "string"}}],
        }
        op = {
            "parameters": [{"name": "grade", "in": "query", "description": "new", "schema": {"type": "string"}}],
        }
        params = parse_parameters(_SPEC, op, path_item)
        assert len(params) == 1
        assert params[0]["description"] == "new"

    def test_enum_values_in_description(self):
        """Enum values should be included in parameter descriptions."""
        op = {
            "parameters": [
                {
                    "name": "privacy",
                    "in": "query",
                    "description": "Visibility",
                    "schema": {"$ref": "#/components/schemas/Privacy"},
                },
            ],
        }
        param = parse_parameters(_SPEC, op)[0]
        assert param["description"] == "Visibility (values: private, shared, team)"
        assert param["enum"] == ["private", "shared", "team"]

    def test_default_kept_for_optional(self):
        op = {
            "parameters": [
                {
                    "name": "timing",
                    "in": "query",
                    "schema": {"type": "string", "enum": ["daily", "weekly"], "default": "daily"},
                },
            ],
        }
        assert parse_parameters(_SPEC, op)[0]["default"] == "daily"

    def test_large_integer_default_sanitized(self):
        """Integers >= 2^53 must be replaced with None."""
        op = {
            "parameters": [
                {"name": "bignum", "in": "query", "schema": {"type": "integer", "default": 2**53}},
            ],
        }
        assert parse_parameters(_SPEC, op)[0]["default"] is None

    def test_no_parameters(self):
        assert parse_parameters(_SPEC, {}) == []


class TestParseRequestBody:
    """Test request body detection and field documentation."""

    def _op(self, schema, required=True):
        return {
            "requestBody": {
                "required": required,
                "content": {"application/json": {"schema": schema}},
            },
        }

    def test_no_body(self):
        assert parse_request_body(_SPEC, {}) is None

    def test_required_flag(self):
        body = parse_request_body(_SPEC, self._op({"$ref": "#/components/schemas/PortfolioRequest"}))
        assert body["required"] is True
        optional = parse_request_body(_SPEC, self._op({"type": "object"}, required=False))
        assert optional["required"] is False

    def test_required_defaults_to_false(self):
        op = {"requestBody": {"content": {"application/json": {"schema": {"type": "object"}}}}}
        assert parse_request_body(_SPEC, op)["required"] is False

    def test_readonly_fields_excluded(self):
        """readOnly fields must not be documented as body fields."""
        body = parse_request_body(_SPEC, self._op({"$ref": "#/components/schemas/PortfolioRequest"}))
        names = [f["name"] for f in body["fields"]]
        assert names == ["name", "privacy"]

    def test_field_details(self):
        body = parse_request_body(_SPEC, self._op({"$ref": "#/components/schemas/PortfolioRequest"}))
        name, privacy = body["fields"]
        assert name["required"] is True
        assert name["description"] == "Portfolio name"
        assert privacy["required"] is False
        assert privacy["type"] == "str"
        assert privacy["description"] == "Values: private, shared, team"

    def test_allof_fields_merged(self):
        body = parse_request_body(_SPEC, self._op({"$ref": "#/components/schemas/ComposedObject"}))
        names = [f["name"] for f in body["fields"]]
        assert names == ["name", "privacy", "tags"]

    def test_array_body_has_no_fields(self):
        """Array bodies are passed through whole, with no per-field docs."""
        body = parse_request_body(_SPEC, self._op({"type": "array", "items": {"type": "string"}}))
        assert body["type"] == "list[str]"
        assert body["fields"] == []


class TestResponses:
    """Test response status and type detection."""

    def test_statuses_sorted_numeric_only(self):
        op = {
            "responses": {
                "404": {"$ref": "#/components/responses/NotFound"},
                "200": {"description": "OK"},
                "default": {"description": "Error"},
                "5XX": {"description": "Server error"},
            },
        }
        assert get_response_statuses(_SPEC, op) == [200, 404]

    def test_array_response(self):
        op = {
            "responses": {
                "200": {
                    "content": {
                        "application/json": {
                            "schema": {"type": "array", "items": {"type": "object"}},
                        }
                    }
                }
            }
        }
        assert get_response_type(_SPEC, op) == "array"

    def test_entries_response_via_ref(self):
        """A response $ref to an object with an 'entries' array is 'entries'."""
        op = {"responses": {"200": {"$ref": "#/components/responses/EntryList"}}}
        assert get_response_type(_SPEC, op) == "entries"

    def test_object_response(self):
        op = {
            "responses": {
                "200": {
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/PortfolioRequest"},
                        }
                    }
                }
            }
        }
        assert get_response_type(_SPEC, op) == "object"

    def test_no_content(self):
        """Endpoints without response content return 'none'."""
        op = {"responses": {"200": {"description": "OK"}}}
        assert get_response_type(_SPEC, op) == "none"
