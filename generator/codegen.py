"""Render templates and write generated output.

Takes the context from context_builder and produces scorecard/client.py.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
OUTPUT_PATH = Path(__file__).parent.parent / "scorecard" / "client.py"

logger = logging.getLogger(__name__)


def pyrepr(value: Any, level: int = 0) -> str:
    """Render a JSON-like value as an indented Python literal."""
    pad = "    " * (level + 1)
    end = "    " * level
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [f"{pad}{json.dumps(key)}: {pyrepr(item, level + 1)}," for key, item in value.items()]
        return "{\n" + "\n".join(items) + f"\n{end}}}"
    if isinstance(value, list):
        if not value:
            return "[]"
        items = [f"{pad}{pyrepr(item, level + 1)}," for item in value]
        return "[\n" + "\n".join(items) + f"\n{end}]"
    if isinstance(value, str):
        return json.dumps(value)
    return repr(value)


def render(context: dict[str, Any]) -> str:
    """Render the client template to source text."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["pyrepr"] = pyrepr
    template = env.get_template("client.py.j2")
    return template.render(**context)


def generate(context: dict[str, Any], output_path: Path | None = None) -> Path:
    """Render the client template and write it to scorecard/client.py."""
    output = render(context)

    target = output_path or OUTPUT_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(output)

    logger.info("Generated %s (%d endpoints)", target, context["endpoint_count"])
    return target
