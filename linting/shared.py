"""Shared utilities for the structural linters.

Holds the path constants, file iteration, source parsing and violation
reporting that every rule module uses, so each rule stays a single check.
"""

from __future__ import annotations

import ast
import sys
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

_POLICY_PATH = ROOT / "linting" / "policy.toml"


def _load_policy() -> dict[str, object]:
    if not _POLICY_PATH.exists():
        return {}
    try:
        return tomllib.loads(_POLICY_PATH.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return {}


_POLICY: dict[str, object] = _load_policy()


def _paths() -> dict[str, object]:
    val = _POLICY.get("paths")
    return val if isinstance(val, dict) else {}


SRC_DIR: Path = ROOT / str(_paths().get("src", "envfallback"))
TESTS_DIR: Path = ROOT / str(_paths().get("tests", "tests"))
CONFIG_DIR: Path = ROOT / str(_paths().get("config", "envfallback/config"))


def rel(path: Path) -> str:
    """Return *path* relative to the project root as a string."""
    try:
        return str(path.relative_to(ROOT))
    except ValueError:
        return str(path)


def iter_python_files(*dirs: Path) -> list[Path]:
    """Return sorted .py files under *dirs*, skipping ``__pycache__``."""
    files: list[Path] = []
    for d in dirs:
        if not d.is_dir():
            continue
        for py in sorted(d.rglob("*.py")):
            if "__pycache__" in py.parts:
                continue
            files.append(py)
    return files


def config_modules() -> list[Path]:
    """Return config modules, leaving out the aggregating ``__init__``."""
    if not CONFIG_DIR.is_dir():
        return []
    return [p for p in sorted(CONFIG_DIR.glob("*.py")) if p.name != "__init__.py"]


def parse_source(filepath: Path) -> tuple[str, ast.Module] | None:
    """Read and parse a Python file, returning ``(source, tree)`` or ``None``."""
    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    try:
        tree = ast.parse(source, filename=str(filepath))
    except SyntaxError:
        return None

    return source, tree


def report(header: str, violations: list[str]) -> int:
    """Print *violations* to stderr under *header* and return an exit code."""
    if not violations:
        return 0
    print(f"{header}:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1
