"""Command-line interface for Camel Cards."""
