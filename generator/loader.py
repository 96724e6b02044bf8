"""Load and parse the SecurityScorecard OpenAPI document.

Reads spec/openapi.json and extracts paths, operations, servers, and
security schemes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

SPEC_PATH = Path(__file__).parent.parent / "spec" / "openapi.json"


def load_spec(path: Path | None = None) -> dict[str, Any]:
    """Load the OpenAPI document from disk."""
    spec_file = path or SPEC_PATH
    with open(spec_file) as f:
        return json.load(f)


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the API document."""
    return spec.get("paths", {})


def get_security_schemes(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component security schemes from the API document."""
    return spec.get("components", {}).get("securitySchemes", {})


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a $ref pointer in the API document."""
    parts = ref.lstrip("#/").split("/")
    node = spec
    for part in parts:
        node = node[part]
    return node


def deref(spec: dict[str, Any], node: dict[str, Any]) -> dict[str, Any]:
    """Follow $ref pointers until a concrete node is reached."""
    while "$ref" in node:
        node = resolve_ref(spec, node["$ref"])
    return node
