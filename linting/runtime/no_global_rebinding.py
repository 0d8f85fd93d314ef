#!/usr/bin/env python
"""Reject rebinding of module-level state in envfallback.

Module-level names (the default client, unit tables, literal sets) are
bound exactly once at import. ``global`` statements and repeated top-level
assignments to the same name are flagged, as are lazy-instance helpers
such as ``get_instance``/``reset_instance``.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from collections import Counter

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import SRC_DIR, rel, report, parse_source, iter_python_files  # noqa: E402

LIFECYCLE_FN_NAMES = {"get_instance", "reset_instance", "set_default_client", "reset_default_client"}


def _assigned_names(node: ast.stmt) -> list[str]:
    if isinstance(node, ast.AnnAssign) and node.value is not None:
        return [node.target.id] if isinstance(node.target, ast.Name) else []
    if isinstance(node, (ast.Assign, ast.AugAssign)):
        targets = node.targets if isinstance(node, ast.Assign) else [node.target]
        return [t.id for t in targets if isinstance(t, ast.Name)]
    return []


def _collect_violations(filepath: Path) -> list[str]:
    result = parse_source(filepath)
    if result is None:
        return []
    _source, tree = result
    r = rel(filepath)
    violations: list[str] = []

    counts = Counter(name for node in tree.body for name in _assigned_names(node))
    for name, count in sorted(counts.items()):
        if count > 1 and name != "__all__":
            violations.append(f"  {r}: module name `{name}` bound {count} times")

    for node in ast.walk(tree):
        if isinstance(node, ast.Global):
            violations.append(f"  {r}:{node.lineno} global statement rebinds {', '.join(node.names)}")
        elif isinstance(node, ast.FunctionDef) and node.name in LIFECYCLE_FN_NAMES:
            violations.append(f"  {r}:{node.lineno} function `{node.name}` implies mutable module state")

    return violations


def main() -> int:
    if not SRC_DIR.is_dir():
        print(f"[no-global-rebinding] Missing source directory: {SRC_DIR}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in iter_python_files(SRC_DIR):
        violations.extend(_collect_violations(py_file))

    return report("Module-state rebinding violations", violations)


if __name__ == "__main__":
    sys.exit(main())
