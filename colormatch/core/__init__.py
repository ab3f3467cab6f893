"""colormatch.core — Foundation layer.

Contains the value types, hex codec, reference palette, matcher,
configuration and report builder.
This module has NO dependencies on colormatch.commands or colormatch.registry.
Only stdlib and numpy are allowed here.
"""
