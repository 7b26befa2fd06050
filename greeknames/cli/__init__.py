"""Command-line interface for greeknames."""
