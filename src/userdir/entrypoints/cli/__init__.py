"""Command-line interface for USERDIR."""
