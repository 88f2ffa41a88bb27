"""pdfartifact CLI — Typer-based command-line interface.

Provides the ``pdfartifact`` command with subcommands for applying,
refreshing, destroying and listing tracked ``pdf`` resources.

All output uses Rich for formatted terminal display.
"""
