#!/usr/bin/env python
"""Enforce no sibling imports between config modules.

Each module under envfallback/config/ defines its own values; one config
module importing another couples their import order.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import rel, report, parse_source, config_modules  # noqa: E402


def _sibling_import(node: ast.stmt, siblings: set[str]) -> str | None:
    if not isinstance(node, ast.ImportFrom):
        return None
    module = node.module or ""
    if node.level == 1 and module in siblings:
        return f".{module}"
    if node.level == 0 and module.startswith("envfallback.config."):
        name = module.rsplit(".", 1)[-1]
        return module if name in siblings else None
    return None


def main() -> int:
    modules = config_modules()
    siblings = {p.stem for p in modules}
    violations: list[str] = []

    for py_file in modules:
        result = parse_source(py_file)
        if result is None:
            continue
        for node in result[1].body:
            imported = _sibling_import(node, siblings)
            if imported:
                violations.append(f"  {rel(py_file)}: from {imported} import ... (line {node.lineno})")

    return report("No-config-cross-imports violations (config/ must not import siblings)", violations)


if __name__ == "__main__":
    sys.exit(main())
