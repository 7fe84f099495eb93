"""Command line interface for svg-ticket."""

from svg_ticket.cli.main import cli

__all__ = ["cli"]
