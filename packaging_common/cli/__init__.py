"""Command groups for the packaging-common CLI."""
