"""Command-line interface for Workforce Report."""
