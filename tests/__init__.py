"""Test suite for envfallback.

Unit tests live under unit/, one subfolder per area (client, lookup,
parsing, logs, lint_rules). Filenames carry no ``test_`` prefix; collection is
handled by conftest.py.
"""
