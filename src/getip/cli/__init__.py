"""Command-line interface for getip."""
