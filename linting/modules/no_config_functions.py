#!/usr/bin/env python
"""Enforce no function or class definitions in config modules.

Modules under envfallback/config/ hold constants and environment reads
only. Parsing code belongs in envfallback/helpers/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import rel, report, parse_source, config_modules  # noqa: E402

_DEFINITIONS = (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)


def main() -> int:
    violations: list[str] = []

    for py_file in config_modules():
        result = parse_source(py_file)
        if result is None:
            continue
        for node in result[1].body:
            if isinstance(node, _DEFINITIONS):
                violations.append(f"  {rel(py_file)}: {node.name} (line {node.lineno})")

    return report("No-config-functions violations (config/ must be declarative)", violations)


if __name__ == "__main__":
    sys.exit(main())
