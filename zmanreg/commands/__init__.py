"""Command implementations for the zmanreg CLI."""
