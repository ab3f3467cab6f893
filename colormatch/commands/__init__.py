"""CLI subcommands.

Every module in this package that defines a `command` object is
auto-registered by colormatch.registry.discover(). Each module's
docstring is its `colormatch help <command>` text.
"""
