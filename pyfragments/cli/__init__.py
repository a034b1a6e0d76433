"""Command line interface for pyfragments."""
