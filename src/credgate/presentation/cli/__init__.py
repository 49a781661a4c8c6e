"""Command-line interface for credgate."""
