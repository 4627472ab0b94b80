"""Command line interface for the fences calculator."""
