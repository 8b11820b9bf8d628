"""Command line interface for appfolders."""
