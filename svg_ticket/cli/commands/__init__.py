"""CLI commands for svg-ticket."""

from svg_ticket.cli.commands.parse import parse
from svg_ticket.cli.commands.profiles import profiles
from svg_ticket.cli.commands.render import render

__all__ = ["render", "parse", "profiles"]
