"""Utility modules for the pyfragments CLI."""
