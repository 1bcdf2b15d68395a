"""Command line interface for unitbench."""
