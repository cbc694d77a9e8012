"""Command-line interface for Line Grouper."""
