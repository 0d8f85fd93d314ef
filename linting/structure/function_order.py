#!/usr/bin/env python
"""Enforce private-before-public function ordering.

In each envfallback module, every ``_``-prefixed top-level function must
come before the first public one. Methods and nested functions are not
checked.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import SRC_DIR, rel, report, parse_source, iter_python_files  # noqa: E402


def _first_misplaced(tree: ast.Module) -> tuple[ast.FunctionDef, ast.FunctionDef] | None:
    first_public: ast.FunctionDef | None = None
    for node in tree.body:
        if not isinstance(node, ast.FunctionDef):
            continue
        if not node.name.startswith("_"):
            first_public = first_public or node
        elif first_public is not None:
            return node, first_public
    return None


def check_file(filepath: Path) -> str | None:
    """Return a violation line for *filepath*, or ``None`` when ordered."""
    result = parse_source(filepath)
    if result is None:
        return None
    _source, tree = result

    misplaced = _first_misplaced(tree)
    if misplaced is None:
        return None
    private, public = misplaced
    return (
        f"  {rel(filepath)}: private {private.name}() at line {private.lineno} "
        f"follows public {public.name}() at line {public.lineno}"
    )


def main() -> int:
    violations = [v for v in map(check_file, iter_python_files(SRC_DIR)) if v]
    return report("Function-order violations (private before public)", violations)


if __name__ == "__main__":
    sys.exit(main())
