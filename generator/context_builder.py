"""Build Jinja2 template context from parsed OpenAPI spec.

Assigns each operation to a group, builds the endpoint descriptors and
facade method definitions, and assembles the full context dict for
client.py.j2.
"""

from __future__ import annotations

import json
from typing import Any

from .loader import get_paths, get_security_schemes
from .naming import build_method_name, path_placeholders
from .schema_parser import (
    _strip_html,
    get_response_statuses,
    get_response_type,
    parse_parameters,
    parse_request_body,
)

# Group assignment by API path prefix (longest prefix match)
_PATH_TO_GROUP: dict[str, str] = {
    "/companies": "companies",
    "/companies/{scorecard_identifier}/history": "history",
    "/companies/{scorecard_identifier}/issues": "issues",
    "/portfolios": "portfolios",
    "/metadata": "metadata",
    "/reports": "reports",
    "/users": "users",
}

_METHODS = ("get", "post", "put", "delete", "patch")

_RESPONSE_NOTES: dict[str, str] = {
    "array": "Returns a list.",
    "entries": "Returns a list under 'entries'.",
}


def path_to_group(path: str) -> str:
    """Map an API path to its group using longest prefix match."""
    best_match = "misc"  # default
    best_len = 0
    for prefix, group in _PATH_TO_GROUP.items():
        if path.startswith(prefix) and len(prefix) > best_len:
            best_match = group
            best_len = len(prefix)
    return best_match


def _format_field(item: dict[str, Any], extra: list[str]) -> str:
    """Format one documented parameter or body field as a docstring line."""
    qualifiers = [item["type"], *extra]
    if item["required"]:
        qualifiers.append("required")
    elif item.get("default") is not None:
        qualifiers.append(f"default {item['default']!r}")
    line = f"    {item['name']} ({', '.join(qualifiers)})"
    if item["description"]:
        line += f": {item['description']}"
    return line


def _escape_docstring(text: str) -> str:
    """Make text safe inside a triple-double-quoted docstring."""
    return text.replace("\\", "\\\\").replace('"""', r'\"\"\"')


def _make_doc(
    operation: dict[str, Any],
    name: str,
    params: list[dict[str, Any]],
    body: dict[str, Any] | None,
    response_type: str,
    statuses: list[int],
) -> list[str]:
    """Build the facade docstring as a list of lines."""
    summary = operation.get("summary", "")
    description = operation.get("description", "")
    if description:
        description = _strip_html(description)

    if summary:
        first = summary
    elif description:
        first = description.split(".")[0]
    else:
        verb, _, resource = name.partition("_")
        first = f"{verb.upper()} {resource.replace('_', ' ')}"

    lines = [first.rstrip(". ") + "."]

    if description and not description.startswith(first):
        lines += ["", description]

    if body is not None and body["fields"]:
        lines += ["", "Body fields:"]
        lines += [_format_field(f, []) for f in body["fields"]]

    if params:
        lines += ["", "Metadata:"]
        lines += [_format_field(p, [p["location"]]) for p in params]

    lines.append("")
    note = _RESPONSE_NOTES.get(response_type)
    if note:
        lines.append(note)
    lines.append("Documented responses: " + ", ".join(str(s) for s in statuses) + ".")
    return [_escape_docstring(line) for line in lines]


def _make_signature(
    accepts_body: bool,
    requires_body: bool,
    accepts_metadata: bool,
    requires_metadata: bool,
) -> tuple[str, str]:
    """Return the facade parameter list and the matching call() arguments."""
    params = ["self"]
    call_args: list[str] = []

    if accepts_body:
        params.append("body: Any" if requires_body else "body: Any = None")
        call_args.append("body")

    if accepts_metadata:
        if requires_metadata:
            # Required metadata cannot follow an optional body positionally.
            if accepts_body and not requires_body:
                params.append("*")
            params.append("metadata: Metadata")
        else:
            params.append("metadata: Metadata | None = None")
        call_args.append("metadata" if accepts_body else "metadata=metadata")

    return ", ".join(params), ", ".join(call_args)


def _tuple_literal(values: list[Any]) -> str:
    """Render ints or strings as a Python tuple literal."""
    items = [json.dumps(v) if isinstance(v, str) else str(v) for v in values]
    if len(items) == 1:
        return f"({items[0]},)"
    return "(" + ", ".join(items) + ")"


def _deduplicate_method_names(endpoints: list[dict[str, Any]]) -> None:
    """Ensure all method names are unique by appending a counter if needed."""
    taken = {endpoint["name"] for endpoint in endpoints}
    seen: set[str] = set()
    for endpoint in endpoints:
        name = endpoint["name"]
        if name in seen:
            counter = 2
            while f"{name}_{counter}" in taken:
                counter += 1
            name = f"{name}_{counter}"
            taken.add(name)
            endpoint["name"] = name
        seen.add(name)


def build_endpoint(
    spec: dict[str, Any],
    method: str,
    path: str,
    path_item: dict[str, Any],
) -> dict[str, Any]:
    """Build the template context for a single operation."""
    operation = path_item[method]
    name = build_method_name(method, path)
    params = parse_parameters(spec, operation, path_item)
    body = parse_request_body(spec, operation)
    statuses = get_response_statuses(spec, operation)
    response_type = get_response_type(spec, operation)

    declared_path_params = {p["name"] for p in params if p["location"] == "path"}
    undeclared = set(path_placeholders(path)) - declared_path_params
    if undeclared:
        raise ValueError(
            f"{method.upper()} {path} has undeclared path parameters: {sorted(undeclared)}"
        )

    accepts_body = body is not None
    requires_body = accepts_body and body["required"]
    accepts_metadata = bool(params)
    requires_metadata = any(p["required"] for p in params)
    required_query = [p["name"] for p in params if p["required"] and p["location"] != "path"]

    signature, call_args = _make_signature(
        accepts_body, requires_body, accepts_metadata, requires_metadata,
    )

    return {
        "name": name,
        "method": method,
        "http_method": method.upper(),
        "path": path,
        "group": path_to_group(path),
        "params": params,
        "body": body,
        "accepts_body": accepts_body,
        "requires_body": requires_body,
        "accepts_metadata": accepts_metadata,
        "requires_metadata": requires_metadata,
        "required_query": required_query,
        "statuses": statuses,
        "response_type": response_type,
        "signature": signature,
        "call_args": call_args,
        "doc": _make_doc(operation, name, params, body, response_type, statuses),
    }


def build_definition(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract the parts of the document the dispatch core needs at runtime."""
    return {
        "servers": spec.get("servers", []),
        "security": spec.get("security", []),
        "components": {"securitySchemes": get_security_schemes(spec)},
    }


def build_context(spec: dict[str, Any]) -> dict[str, Any]:
    """Build the full template context from the OpenAPI spec."""
    paths = get_paths(spec)
    endpoints: list[dict[str, Any]] = []

    for path, path_item in sorted(paths.items()):
        for method in _METHODS:
            if method not in path_item:
                continue
            endpoints.append(build_endpoint(spec, method, path, path_item))

    _deduplicate_method_names(endpoints)

    for endpoint in endpoints:
        flags = [
            f"{flag}=True"
            for flag in ("accepts_body", "requires_body", "accepts_metadata", "requires_metadata")
            if endpoint[flag]
        ]
        if endpoint["required_query"]:
            flags.append(f"required_query={_tuple_literal(endpoint['required_query'])}")
        endpoint["descriptor_args"] = ", ".join(
            [*flags, f"statuses={_tuple_literal(endpoint['statuses'])}"]
        )
        endpoint["call"] = f'self.call("{endpoint["name"]}"' + (
            f", {endpoint['call_args']})" if endpoint["call_args"] else ")"
        )

    groups: dict[str, list[dict[str, Any]]] = {}
    for endpoint in endpoints:
        groups.setdefault(endpoint["group"], []).append(endpoint)

    return {
        "endpoints": endpoints,
        "groups": groups,
        "endpoint_count": len(endpoints),
        "definition": build_definition(spec),
        "api_title": spec.get("info", {}).get("title", "API"),
        "api_version": spec.get("info", {}).get("version", "unknown"),
    }
