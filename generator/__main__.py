"""Entry point: python -m generator

Reads spec/openapi.json, generates scorecard/client.py.
"""

from __future__ import annotations

import logging

from .codegen import generate
from .context_builder import build_context
from .loader import load_spec


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    spec = load_spec()
    context = build_context(spec)
    generate(context)


if __name__ == "__main__":
    main()
