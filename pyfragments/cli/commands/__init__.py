"""Command modules for the pyfragments CLI."""

from pyfragments.cli.commands import auth, fragments

__all__ = ["auth", "fragments"]
