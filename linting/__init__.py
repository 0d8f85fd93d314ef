"""Custom structural lint checks for envfallback.

Each rule is a script with a ``main() -> int`` entry point returning a
process exit code. ``tests/unit/lint_rules/structure_rules.py`` runs them all.

Package layout
--------------
shared.py           Path constants, file iteration, parsing, reporting.
policy.toml         Paths scanned by the rules.

structure/
    function_order.py           Private functions must precede public ones.
    one_class_per_file.py       One non-dataclass class per source file.

modules/
    no_config_functions.py      Config modules must be purely declarative.
    no_config_cross_imports.py  Config modules must not import siblings.

runtime/
    no_global_rebinding.py      Module-level names are bound once, no ``global``.

testing/
    no_test_file_prefix.py      Test filenames must not use the test_ prefix.
    unit_test_domain_folders.py Unit tests must live in domain subfolders.
"""
