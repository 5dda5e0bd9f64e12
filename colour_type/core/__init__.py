"""colour_type.core — Foundation layer.

Contains the Colour value, the storage adapter, shared types, env settings
and the report builder. This module has NO dependencies on
colour_type.commands, colour_type.registry or colour_type.palette, and never
decodes images. Only the stdlib and SQLAlchemy (column.py) are allowed here.
"""
