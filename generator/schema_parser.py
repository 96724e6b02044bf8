"""Extract parameter, body and response facts from OpenAPI operations.

Handles:
- Path parameters ({portfolio_id}, {scorecard_identifier})
- Query parameters
- Path-item level parameters shared by every operation on a path
- Request body (JSON), passed through whole; object fields are only documented
- $ref resolution for schemas, parameters and responses
- allOf/oneOf/anyOf composition
- readOnly field exclusion
- Large integer sanitization (>= 2^53)
- Enum value extraction into descriptions
"""

from __future__ import annotations

import re
from typing import Any

from .loader import deref, resolve_ref

# Sentinel: integers >= 2^53 are unsafe for JSON serialization
MAX_SAFE_INT = 2**53


def _strip_html(text: str) -> str:
    """Strip HTML tags and collapse whitespace."""
    text = re.sub(r"<[^>]+>", "", text)
    text = re.sub(r"\s+", " ", text).strip()
    return text


def _sanitize_default(value: Any) -> Any:
    """Sanitize default values: replace unsafe large integers with None."""
    if isinstance(value, int) and not isinstance(value, bool) and abs(value) >= MAX_SAFE_INT:
        return None
    return value


def resolve_schema_type(
    spec: dict[str, Any],
    schema: dict[str, Any],
) -> str:
    """Resolve an OpenAPI schema to a Python type string."""
    if not schema:
        return "Any"

    if "$ref" in schema:
        resolved = resolve_ref(spec, schema["$ref"])
        return resolve_schema_type(spec, resolved)

    if "allOf" in schema:
        for sub in schema["allOf"]:
            resolved = sub
            if "$ref" in sub:
                resolved = resolve_ref(spec, sub["$ref"])
            if resolved.get("type") == "object" or "properties" in resolved:
                return "dict"
            if "enum" in resolved:
                return "str"
        return "dict"

    for key in ("oneOf", "anyOf"):
        if key in schema:
            for sub in schema[key]:
                t = resolve_schema_type(spec, sub)
                if t != "Any":
                    return t
            return "Any"

    if "enum" in schema:
        return "str"

    schema_type = schema.get("type")
    if schema_type == "string":
        return "str"
    if schema_type == "integer":
        return "int"
    if schema_type == "number":
        return "float"
    if schema_type == "boolean":
        return "bool"
    if schema_type == "array":
        items = schema.get("items", {})
        item_type = resolve_schema_type(spec, items)
        return f"list[{item_type}]"
    if schema_type == "object" or "properties" in schema:
        return "dict"

    return "Any"


def _get_enum_values(spec: dict[str, Any], schema: dict[str, Any]) -> list[str] | None:
    """Extract enum values from a schema, resolving $ref if needed."""
    if "$ref" in schema:
        resolved = resolve_ref(spec, schema["$ref"])
        return _get_enum_values(spec, resolved)
    if "enum" in schema:
        return [str(v) for v in schema["enum"]]
    if "allOf" in schema:
        for sub in schema["allOf"]:
            vals = _get_enum_values(spec, sub)
            if vals:
                return vals
    return None


def _describe(spec: dict[str, Any], description: str, schema: dict[str, Any]) -> tuple[str, list[str] | None]:
    """Clean a description and append the schema's enum values to it."""
    if description:
        description = _strip_html(description)

    enum_values = _get_enum_values(spec, schema)
    if enum_values:
        enum_str = ", ".join(enum_values)
        if description:
            description = f"{description} (values: {enum_str})"
        else:
            description = f"Values: {enum_str}"
    return description, enum_values


def _is_read_only(schema: dict[str, Any]) -> bool:
    """Check if a schema field is readOnly."""
    return schema.get("readOnly", False)


def _flatten_object_schema(
    spec: dict[str, Any],
    schema: dict[str, Any],
) -> list[dict[str, Any]]:
    """Flatten an object schema into a list of documented body fields."""
    schema = deref(spec, schema)

    if "allOf" in schema:
        merged_props: dict[str, Any] = {}
        merged_required: list[str] = []
        for sub in schema["allOf"]:
            sub = deref(spec, sub)
            merged_props.update(sub.get("properties", {}))
            merged_required.extend(sub.get("required", []))
        schema = {
            "type": "object",
            "properties": merged_props,
            "required": merged_required,
        }

    properties = schema.get("properties", {})
    required_fields = set(schema.get("required", []))
    fields = []

    for prop_name, prop_schema in properties.items():
        if _is_read_only(prop_schema):
            continue

        description, enum_values = _describe(spec, prop_schema.get("description", ""), prop_schema)
        fields.append({
            "name": prop_name,
            "type": resolve_schema_type(spec, prop_schema),
            "required": prop_name in required_fields,
            "description": description,
            "enum": enum_values,
        })

    return fields


def _collect_raw_parameters(
    spec: dict[str, Any],
    operation: dict[str, Any],
    path_item: dict[str, Any] | None,
) -> list[dict[str, Any]]:
    """Merge path-item and operation parameters; operation entries win."""
    merged: dict[tuple[str, str], dict[str, Any]] = {}
    for source in ((path_item or {}).get("parameters", []), operation.get("parameters", [])):
        for raw in source:
            param = deref(spec, raw)
            merged[(param["name"], param.get("in", "query"))] = param
    return list(merged.values())


def parse_parameters(
    spec: dict[str, Any],
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Parse all path, query and header parameters for an operation."""
    params: list[dict[str, Any]] = []

    for param in _collect_raw_parameters(spec, operation, path_item):
        schema = param.get("schema", {})
        location = param.get("in", "query")
        description, enum_values = _describe(spec, param.get("description", ""), schema)

        default = _sanitize_default(deref(spec, schema).get("default") if schema else None)
        # Path parameters are always required, whatever the document says.
        is_required = location == "path" or param.get("required", False)

        params.append({
            "name": param["name"],
            "type": resolve_schema_type(spec, schema),
            "required": is_required,
            "default": default if not is_required else None,
            "description": description,
            "enum": enum_values,
            "location": location,
        })

    return params


def parse_request_body(
    spec: dict[str, Any],
    operation: dict[str, Any],
) -> dict[str, Any] | None:
    """Describe the JSON request body of an operation, or None if it has none."""
    if "requestBody" not in operation:
        return None

    request_body = deref(spec, operation["requestBody"])
    content = request_body.get("content", {})
    json_content = content.get("application/json", {})
    body_schema = json_content.get("schema", {})

    fields: list[dict[str, Any]] = []
    if body_schema:
        resolved = deref(spec, body_schema)
        if resolved.get("type") == "object" or "properties" in resolved or "allOf" in resolved:
            fields = _flatten_object_schema(spec, body_schema)

    return {
        "required": request_body.get("required", False),
        "type": resolve_schema_type(spec, body_schema),
        "fields": fields,
    }


def get_response_statuses(spec: dict[str, Any], operation: dict[str, Any]) -> list[int]:
    """Return the documented numeric response status codes, sorted."""
    statuses = []
    for code in operation.get("responses", {}):
        # 'default' and range keys like '5XX' are not a single status
        if str(code).isdigit():
            statuses.append(int(code))
    return sorted(statuses)


def get_response_type(spec: dict[str, Any], operation: dict[str, Any]) -> str:
    """Determine the response type of an operation."""
    responses = operation.get("responses", {})
    success = deref(spec, responses.get("200", responses.get("201", {})))
    content = success.get("content", {})

    for ct in ("application/json", "text/json", "text/plain"):
        if ct in content:
            schema = deref(spec, content[ct].get("schema", {}))
            if schema.get("type") == "array":
                return "array"
            if "properties" in schema:
                entries = deref(spec, schema["properties"].get("entries", {}))
                if entries.get("type") == "array":
                    return "entries"
                return "object"
            if schema.get("type") == "object":
                return "object"
    return "none"
