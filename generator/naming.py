"""Convert HTTP method + path to client method names.

Pattern: {verb}_{resource}
  - verb is the lower-case HTTP method, so the name always says what is sent
  - static path segments are snake-cased and joined with underscores
  - placeholders ({portfolio_id}) are dropped
  - when the path ends in a placeholder (and the verb is not post) the last
    static segment is singularised

Examples:
  GET    /portfolios                                  -> get_portfolios
  POST   /portfolios                                  -> post_portfolios
  GET    /portfolios/{portfolio_id}                   -> get_portfolio
  DELETE /portfolios/{portfolio_id}/companies/{domain} -> delete_portfolios_company
  GET    /companies/{scorecard_identifier}/issues/malware_detected
                                                      -> get_companies_issues_malware_detected
  GET    /metadata/issue-types                        -> get_metadata_issue_types
"""

from __future__ import annotations

import re

_METHODS = ("get", "post", "put", "patch", "delete")

# Known plural/singular mappings for SecurityScorecard resources
_PLURALS: dict[str, str] = {
    "company": "companies",
    "portfolio": "portfolios",
    "factor": "factors",
    "issue": "issues",
    "issue_type": "issue_types",
    "report": "reports",
    "user": "users",
    "alert": "alerts",
    "event": "events",
    "service": "services",
    "address": "addresses",
}

_SINGULARS: dict[str, str] = {v: k for k, v in _PLURALS.items()}


def _singularize(word: str) -> str:
    """Return the singular form of a resource name."""
    if word in _SINGULARS:
        return _SINGULARS[word]
    if word in _PLURALS:
        return word
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("ses"):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def _camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def _sanitize_segment(segment: str) -> str:
    """Sanitize a path segment for use in a Python identifier."""
    name = _camel_to_snake(segment)
    name = re.sub(r"[.\-]", "_", name)
    name = re.sub(r"[^a-z0-9_]", "", name)
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def is_placeholder(segment: str) -> bool:
    return segment.startswith("{") and segment.endswith("}")


def path_placeholders(path: str) -> list[str]:
    """Return placeholder names in the order they appear in the path."""
    return re.findall(r"\{([^}/]+)\}", path)


def _extract_path_parts(path: str) -> list[str]:
    """Extract static path segments, dropping {params}."""
    return [p for p in path.strip("/").split("/") if p and not is_placeholder(p)]


def build_method_name(method: str, path: str) -> str:
    """Build a client method name from HTTP method and path.

    Returns a name like 'get_portfolios' or 'delete_portfolio'.
    """
    verb = method.lower()
    if verb not in _METHODS:
        raise ValueError(f"Unsupported HTTP method: {method!r}")

    clean_parts = [
        part for part in (_sanitize_segment(p) for p in _extract_path_parts(path)) if part
    ]
    if not clean_parts:
        return f"{verb}_root"

    segments = [s for s in path.strip("/").split("/") if s]
    if verb != "post" and segments and is_placeholder(segments[-1]):
        clean_parts[-1] = _singularize(clean_parts[-1])

    return f"{verb}_{'_'.join(clean_parts)}"
