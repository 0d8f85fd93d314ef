#!/usr/bin/env python
"""Enforce at most one top-level non-dataclass class per envfallback module."""

from __future__ import annotations

import ast
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import SRC_DIR, rel, report, parse_source, iter_python_files  # noqa: E402


def _decorator_name(decorator: ast.expr) -> str:
    target = decorator.func if isinstance(decorator, ast.Call) else decorator
    if isinstance(target, ast.Name):
        return target.id
    if isinstance(target, ast.Attribute):
        return target.attr
    return ""


def _plain_classes(tree: ast.Module) -> list[str]:
    return [
        node.name
        for node in tree.body
        if isinstance(node, ast.ClassDef)
        and not any(_decorator_name(d) == "dataclass" for d in node.decorator_list)
    ]


def main() -> int:
    violations: list[str] = []

    for py_file in iter_python_files(SRC_DIR):
        result = parse_source(py_file)
        if result is None:
            continue
        classes = _plain_classes(result[1])
        if len(classes) > 1:
            violations.append(f"  {rel(py_file)}: {len(classes)} classes ({', '.join(classes)})")

    return report("One non-dataclass-class-per-file violations", violations)


if __name__ == "__main__":
    sys.exit(main())
