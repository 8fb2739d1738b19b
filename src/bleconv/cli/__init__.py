"""Command line interface for bleconv."""
