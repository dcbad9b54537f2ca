"""Command-line interface for bcur."""
