"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by colour_type.registry.discover(). Modules whose name
starts with an underscore are helpers and are skipped.
"""
