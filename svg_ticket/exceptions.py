"""Exception hierarchy for svg-ticket."""

from __future__ import annotations


class TicketSVGError(Exception):
    """Base class for all svg-ticket errors."""


class ParseError(TicketSVGError):
    """Raised when markup cannot be turned back into a document.

    Covers malformed XML, markup rejected by defusedxml, and markup that
    holds no text-bearing elements.
    """


class ConfigError(TicketSVGError):
    """Raised when a configuration file or profile is invalid."""
