"""Command-line interface for idkit."""
