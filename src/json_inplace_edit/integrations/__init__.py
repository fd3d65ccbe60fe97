"""Integrations with test tooling.

- ``_pytest_plugin``: the ``assert_json_mutation`` fixture, registered through
  the ``pytest11`` entry point.  Imported by pytest, not by this package.
"""
