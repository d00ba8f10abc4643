"""Command-line inspector for the CP-1252 tables."""

from cp1252_codec.cli.app import create_app

__all__ = ["create_app"]
